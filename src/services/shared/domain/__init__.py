from .entity import Entity as Entity
from .exception import (
    ApplicationError as ApplicationError,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    FieldError as FieldError,
)
from .exception import (
    FieldValidationException as FieldValidationException,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)
