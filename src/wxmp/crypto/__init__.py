from wxmp.crypto.signature import check_signature, get_signature
from wxmp.crypto.msgcrypt import KeyMaterial, MsgCrypt

__all__ = ["check_signature", "get_signature", "KeyMaterial", "MsgCrypt"]
