from .address import AddressRole, encode_address, hash160
from .classes import (
    ClassificationResult,
    Data,
    Opcode,
    PushEncoding,
    ScriptType,
)
from .errors import MalformedEncoding
from .functions import (
    script2addresses,
    is_public_key,
    match_template,
)
from .networks import Network, NETWORKS, get_network
from .opcodes import OpCodes
from .parsing import decode_script, decompile_script
