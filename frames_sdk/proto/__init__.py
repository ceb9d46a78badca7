"""
Protocol buffer definitions for frame action messages.

The descriptors are built at import time into a private descriptor pool and
follow the wire numbering of the hub protocol's ``message.proto``:

    message Message {
      MessageData data = 1;
      bytes hash = 2;
      HashScheme hash_scheme = 3;
      bytes signature = 4;
      SignatureScheme signature_scheme = 5;
      bytes signer = 6;
      bytes data_bytes = 7;
    }

    message MessageData {
      MessageType type = 1;
      uint64 fid = 2;
      uint32 timestamp = 3;
      FarcasterNetwork network = 4;
      oneof body {
        FrameActionBody frame_action_body = 16;
      }
    }

    message FrameActionBody {
      bytes url = 1;
      uint32 button_index = 2;
      CastId cast_id = 3;
      bytes input_text = 4;
      bytes state = 5;
      bytes transaction_id = 6;
      bytes address = 7;
    }

    message CastId {
      uint64 fid = 1;
      bytes hash = 2;
    }

Only the message bodies this SDK reads are declared. Other bodies are kept
as unknown fields when decoding.
"""
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.internal import enum_type_wrapper

_PACKAGE = "frames_sdk"
_F = descriptor_pb2.FieldDescriptorProto

_ENUMS = {
    "MessageType": [
        ("MESSAGE_TYPE_NONE", 0),
        ("MESSAGE_TYPE_CAST_ADD", 1),
        ("MESSAGE_TYPE_CAST_REMOVE", 2),
        ("MESSAGE_TYPE_REACTION_ADD", 3),
        ("MESSAGE_TYPE_REACTION_REMOVE", 4),
        ("MESSAGE_TYPE_LINK_ADD", 5),
        ("MESSAGE_TYPE_LINK_REMOVE", 6),
        ("MESSAGE_TYPE_VERIFICATION_ADD_ETH_ADDRESS", 7),
        ("MESSAGE_TYPE_VERIFICATION_REMOVE", 8),
        ("MESSAGE_TYPE_USER_DATA_ADD", 11),
        ("MESSAGE_TYPE_USERNAME_PROOF", 12),
        ("MESSAGE_TYPE_FRAME_ACTION", 13),
    ],
    "HashScheme": [
        ("HASH_SCHEME_NONE", 0),
        ("HASH_SCHEME_BLAKE3", 1),
    ],
    "SignatureScheme": [
        ("SIGNATURE_SCHEME_NONE", 0),
        ("SIGNATURE_SCHEME_ED25519", 1),
        ("SIGNATURE_SCHEME_EIP712", 2),
    ],
    "FarcasterNetwork": [
        ("FARCASTER_NETWORK_NONE", 0),
        ("FARCASTER_NETWORK_MAINNET", 1),
        ("FARCASTER_NETWORK_TESTNET", 2),
        ("FARCASTER_NETWORK_DEVNET", 3),
    ],
}

# (name, number, type, referenced type)
_MESSAGES = {
    "CastId": [
        ("fid", 1, _F.TYPE_UINT64, None),
        ("hash", 2, _F.TYPE_BYTES, None),
    ],
    "FrameActionBody": [
        ("url", 1, _F.TYPE_BYTES, None),
        ("button_index", 2, _F.TYPE_UINT32, None),
        ("cast_id", 3, _F.TYPE_MESSAGE, "CastId"),
        ("input_text", 4, _F.TYPE_BYTES, None),
        ("state", 5, _F.TYPE_BYTES, None),
        ("transaction_id", 6, _F.TYPE_BYTES, None),
        ("address", 7, _F.TYPE_BYTES, None),
    ],
    "MessageData": [
        ("type", 1, _F.TYPE_ENUM, "MessageType"),
        ("fid", 2, _F.TYPE_UINT64, None),
        ("timestamp", 3, _F.TYPE_UINT32, None),
        ("network", 4, _F.TYPE_ENUM, "FarcasterNetwork"),
        ("frame_action_body", 16, _F.TYPE_MESSAGE, "FrameActionBody"),
    ],
    "Message": [
        ("data", 1, _F.TYPE_MESSAGE, "MessageData"),
        ("hash", 2, _F.TYPE_BYTES, None),
        ("hash_scheme", 3, _F.TYPE_ENUM, "HashScheme"),
        ("signature", 4, _F.TYPE_BYTES, None),
        ("signature_scheme", 5, _F.TYPE_ENUM, "SignatureScheme"),
        ("signer", 6, _F.TYPE_BYTES, None),
        ("data_bytes", 7, _F.TYPE_BYTES, None),
    ],
}

# Fields that belong to the MessageData "body" oneof
_BODY_FIELDS = {"frame_action_body"}


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=f"{_PACKAGE}/message.proto",
        package=_PACKAGE,
        syntax="proto3",
    )

    for enum_name, values in _ENUMS.items():
        enum_proto = file_proto.enum_type.add(name=enum_name)
        for value_name, number in values:
            enum_proto.value.add(name=value_name, number=number)

    for message_name, fields in _MESSAGES.items():
        message_proto = file_proto.message_type.add(name=message_name)
        if message_name == "MessageData":
            message_proto.oneof_decl.add(name="body")
        for field_name, number, field_type, type_name in fields:
            field = message_proto.field.add(
                name=field_name,
                number=number,
                type=field_type,
                label=_F.LABEL_OPTIONAL,
            )
            if type_name:
                field.type_name = f".{_PACKAGE}.{type_name}"
            if message_name == "MessageData" and field_name in _BODY_FIELDS:
                field.oneof_index = 0

    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(
        _pool.FindMessageTypeByName(f"{_PACKAGE}.{name}")
    )


def _enum_wrapper(name: str) -> enum_type_wrapper.EnumTypeWrapper:
    return enum_type_wrapper.EnumTypeWrapper(
        _pool.FindEnumTypeByName(f"{_PACKAGE}.{name}")
    )


CastId = _message_class("CastId")
FrameActionBody = _message_class("FrameActionBody")
MessageData = _message_class("MessageData")
Message = _message_class("Message")

MessageType = _enum_wrapper("MessageType")
HashScheme = _enum_wrapper("HashScheme")
SignatureScheme = _enum_wrapper("SignatureScheme")
FarcasterNetwork = _enum_wrapper("FarcasterNetwork")

__all__ = [
    'CastId',
    'FrameActionBody',
    'MessageData',
    'Message',
    'MessageType',
    'HashScheme',
    'SignatureScheme',
    'FarcasterNetwork',
]
