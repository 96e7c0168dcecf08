#!/usr/bin/env python3

import aws_cdk as cdk

from booking_stack import BookingStack

app = cdk.App()
BookingStack(
    app,
    "BookingStack",
)

app.synth()
