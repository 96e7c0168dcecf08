import pytest


@pytest.fixture
def valid_item():
    """検証を通る DynamoDB アイテム（キー属性なし）"""
    return {
        "id": "booking-1",
        "bookingHash": "0xabc123",
        "guestEthAddress": "0xe99356bde974bbe08721d77712168fa070aa8da4",
        "roomType": "double",
        "from": 1,
        "to": 2,
        "paymentAmount": "0.20001",
        "paymentType": "eth",
        "signatureTimestamp": "1700000000",
        "encryptedPersonalInfo": "0x" + '{"fullName":"Sherlock Holmes"}'.encode().hex(),
    }
