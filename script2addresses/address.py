from __future__ import annotations
from .errors import tert, vert
from .networks import Network, get_network
from Crypto.Hash import RIPEMD160
from enum import Enum
from hashlib import sha256
import base58


HASH160_SIZE = 20


class AddressRole(Enum):
    """How a template payload becomes an address."""
    PUBKEYHASH = 'pubkeyhash'
    SCRIPTHASH = 'scripthash'
    PUBLICKEY = 'publickey'


def hash160(data: bytes) -> bytes:
    """RIPEMD-160 of SHA-256."""
    return RIPEMD160.new(sha256(data).digest()).digest()

def base58check_encode(payload: bytes) -> str:
    """Base58 encode the payload followed by the first 4 bytes of its
        double SHA-256.
    """
    return base58.b58encode_check(payload).decode()

def encode_address(payload: bytes, role: AddressRole,
                   network: str|Network|None = None) -> str:
    """Encode a template payload as a base58check address. Hash payloads
        get the version byte for their role; public keys are hashed and
        reported as the pubkey-hash address of the key.
    """
    tert(type(payload) is bytes, 'payload must be bytes')
    tert(isinstance(role, AddressRole), 'role must be an AddressRole')
    network = get_network(network)

    match role:
        case AddressRole.PUBKEYHASH:
            version = network.pubkeyhash_version
        case AddressRole.SCRIPTHASH:
            version = network.scripthash_version
        case AddressRole.PUBLICKEY:
            version = network.pubkeyhash_version
            payload = hash160(payload)

    vert(len(payload) == HASH160_SIZE, f'hash must be {HASH160_SIZE} bytes')
    return base58check_encode(bytes([version]) + payload)
