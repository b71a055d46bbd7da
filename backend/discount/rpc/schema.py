"""Protobuf schema of the discount RPC service.

The message classes are built at import time from a ``FileDescriptorProto``
equivalent to ``protos/discount.proto``:

    message CouponModel {
        int32 id = 1;
        string product_name = 2;
        string description = 3;
        int32 amount = 4;
    }
    message GetDiscountRequest { string product_name = 1; }
    message CreateDiscountRequest { CouponModel coupon = 1; }
    message UpdateDiscountRequest { CouponModel coupon = 1; }
    message DeleteDiscountRequest { string product_name = 1; }
    message DeleteDiscountResponse { bool success = 1; }

    service DiscountProtoService {
        rpc GetDiscount (GetDiscountRequest) returns (CouponModel);
        rpc CreateDiscount (CreateDiscountRequest) returns (CouponModel);
        rpc UpdateDiscount (UpdateDiscountRequest) returns (CouponModel);
        rpc DeleteDiscount (DeleteDiscountRequest) returns (DeleteDiscountResponse);
    }
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import Message

from discount.schemas.coupon import CouponModel

PACKAGE = "discount"
SERVICE_NAME = f"{PACKAGE}.DiscountProtoService"

_Field = descriptor_pb2.FieldDescriptorProto

_MESSAGES: dict[str, list[tuple[str, int, str | None]]] = {
    "CouponModel": [
        ("id", _Field.TYPE_INT32, None),
        ("product_name", _Field.TYPE_STRING, None),
        ("description", _Field.TYPE_STRING, None),
        ("amount", _Field.TYPE_INT32, None),
    ],
    "GetDiscountRequest": [("product_name", _Field.TYPE_STRING, None)],
    "CreateDiscountRequest": [("coupon", _Field.TYPE_MESSAGE, "CouponModel")],
    "UpdateDiscountRequest": [("coupon", _Field.TYPE_MESSAGE, "CouponModel")],
    "DeleteDiscountRequest": [("product_name", _Field.TYPE_STRING, None)],
    "DeleteDiscountResponse": [("success", _Field.TYPE_BOOL, None)],
}

# method name -> (request message, response message)
METHODS: dict[str, tuple[str, str]] = {
    "GetDiscount": ("GetDiscountRequest", "CouponModel"),
    "CreateDiscount": ("CreateDiscountRequest", "CouponModel"),
    "UpdateDiscount": ("UpdateDiscountRequest", "CouponModel"),
    "DeleteDiscount": ("DeleteDiscountRequest", "DeleteDiscountResponse"),
}


def _file_descriptor_proto() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="discount.proto", package=PACKAGE, syntax="proto3"
    )
    for message_name, fields in _MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for number, (field_name, field_type, type_name) in enumerate(fields, start=1):
            field = message.field.add(
                name=field_name,
                number=number,
                label=_Field.LABEL_OPTIONAL,
                type=field_type,
            )
            if type_name:
                field.type_name = f".{PACKAGE}.{type_name}"

    service = file_proto.service.add(name=SERVICE_NAME.rsplit(".", 1)[1])
    for method_name, (request_name, response_name) in METHODS.items():
        service.method.add(
            name=method_name,
            input_type=f".{PACKAGE}.{request_name}",
            output_type=f".{PACKAGE}.{response_name}",
        )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_file_descriptor_proto().SerializeToString())


def _message_class(name: str) -> type[Message]:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.{name}"))


CouponMessage = _message_class("CouponModel")
GetDiscountRequest = _message_class("GetDiscountRequest")
CreateDiscountRequest = _message_class("CreateDiscountRequest")
UpdateDiscountRequest = _message_class("UpdateDiscountRequest")
DeleteDiscountRequest = _message_class("DeleteDiscountRequest")
DeleteDiscountResponse = _message_class("DeleteDiscountResponse")


def method_path(method_name: str) -> str:
    return f"/{SERVICE_NAME}/{method_name}"


def coupon_to_message(coupon: CouponModel) -> Message:
    return CouponMessage(
        id=coupon.id,
        product_name=coupon.product_name,
        description=coupon.description,
        amount=coupon.amount,
    )


def coupon_from_message(message: Message) -> CouponModel:
    return CouponModel(
        id=message.id,
        product_name=message.product_name,
        description=message.description,
        amount=message.amount,
    )
