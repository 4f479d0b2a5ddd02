from __future__ import annotations
from .address import AddressRole, HASH160_SIZE, encode_address
from .classes import Opcode, Data, Token, ScriptType, ClassificationResult
from .errors import (
    nert,
    InvalidInputType,
    MalformedEncoding,
    NoTemplateMatch,
)
from .networks import Network, get_network
from .opcodes import OpCodes
from .parsing import normalize_script, decode_script
from coincurve import PublicKey
from typing import Callable, Mapping
import logging


logger = logging.getLogger(__name__)

# valid prefixes by public key length
_pubkey_prefixes = {
    33: (0x02, 0x03),
    65: (0x04, 0x06, 0x07),
}

MAX_MULTISIG_KEYS = 16


def is_public_key(candidate: bytes, strict: bool = False) -> bool:
    """Return True if the candidate is shaped like a secp256k1 public
        key: 33 bytes with prefix 02/03 or 65 bytes with prefix
        04/06/07. In strict mode the bytes must also encode a point on
        the curve, and hybrid (06/07) keys must carry a y whose parity
        matches the prefix. Never raises.
    """
    if not isinstance(candidate, (bytes, bytearray, memoryview)):
        return False

    candidate = bytes(candidate)
    if len(candidate) not in _pubkey_prefixes:
        return False
    if candidate[0] not in _pubkey_prefixes[len(candidate)]:
        return False

    if not strict:
        return True

    # libsecp256k1 rejects x or y >= p, off-curve points, and hybrid
    # keys with the wrong y parity
    try:
        PublicKey(candidate)
    except ValueError:
        return False

    return True

def _check_push(token: Data, strict: bool) -> None:
    """Raise NoTemplateMatch if strict and the push is not minimal."""
    nert(not strict or token.is_minimal(),
         f'non-minimal {token.encoding.name} push of {len(token)} bytes')

def match_pubkeyhash(tokens: list[Token], strict: bool = False) -> list[bytes]:
    """OP_DUP OP_HASH160 <20 bytes> OP_EQUALVERIFY OP_CHECKSIG"""
    match tokens:
        case [
            Opcode(code=OpCodes.OP_DUP),
            Opcode(code=OpCodes.OP_HASH160),
            Data() as pkh,
            Opcode(code=OpCodes.OP_EQUALVERIFY),
            Opcode(code=OpCodes.OP_CHECKSIG),
        ] if len(pkh) == HASH160_SIZE:
            _check_push(pkh, strict)
            return [pkh.data]

    raise NoTemplateMatch('not pubkeyhash')

def match_scripthash(tokens: list[Token], strict: bool = False) -> list[bytes]:
    """OP_HASH160 <20 bytes> OP_EQUAL"""
    match tokens:
        case [
            Opcode(code=OpCodes.OP_HASH160),
            Data() as sh,
            Opcode(code=OpCodes.OP_EQUAL),
        ] if len(sh) == HASH160_SIZE:
            _check_push(sh, strict)
            return [sh.data]

    raise NoTemplateMatch('not scripthash')

def match_nulldata(tokens: list[Token], strict: bool = False) -> list[bytes]:
    """OP_RETURN followed by anything."""
    match tokens:
        case [Opcode(code=OpCodes.OP_RETURN), *_]:
            return []

    raise NoTemplateMatch('not nulldata')

def match_pubkey(tokens: list[Token], strict: bool = False) -> list[bytes]:
    """<33 or 65 byte public key> OP_CHECKSIG"""
    match tokens:
        case [Data() as pubkey, Opcode(code=OpCodes.OP_CHECKSIG)]:
            nert(is_public_key(pubkey.data), 'invalid public key')
            _check_push(pubkey, strict)
            return [pubkey.data]

    raise NoTemplateMatch('not pubkey')

def match_multisig(tokens: list[Token], strict: bool = False) -> list[bytes]:
    """OP_m <pubkey>... OP_n OP_CHECKMULTISIG with 1 <= m <= n <= 16
        and exactly n public keys.
    """
    match tokens:
        case [
            Opcode() as m_op,
            *pubkeys,
            Opcode() as n_op,
            Opcode(code=OpCodes.OP_CHECKMULTISIG),
        ]:
            m, n = m_op.small_int, n_op.small_int
            nert(m is not None and n is not None, 'counts must be OP_1-OP_16')
            nert(1 <= m <= n <= MAX_MULTISIG_KEYS, f'invalid counts {m}-of-{n}')
            nert(len(pubkeys) == n, f'expected {n} keys, found {len(pubkeys)}')

            for pubkey in pubkeys:
                nert(type(pubkey) is Data, 'expected public key push')
                nert(is_public_key(pubkey.data), 'invalid public key')
                _check_push(pubkey, strict)

            return [pubkey.data for pubkey in pubkeys]

    raise NoTemplateMatch('not multisig')

# tried in order; the first match wins
templates: list[tuple[ScriptType, Callable[[list[Token], bool], list[bytes]]]] = [
    (ScriptType.PUBKEYHASH, match_pubkeyhash),
    (ScriptType.SCRIPTHASH, match_scripthash),
    (ScriptType.NULLDATA, match_nulldata),
    (ScriptType.PUBKEY, match_pubkey),
    (ScriptType.MULTISIG, match_multisig),
]

_address_roles = {
    ScriptType.PUBKEYHASH: AddressRole.PUBKEYHASH,
    ScriptType.SCRIPTHASH: AddressRole.SCRIPTHASH,
    ScriptType.PUBKEY: AddressRole.PUBLICKEY,
    ScriptType.MULTISIG: AddressRole.PUBLICKEY,
}


def match_template(tokens: list[Token], strict: bool = False) -> tuple[ScriptType, list[bytes]]:
    """Match the tokens against each known template in priority order.
        Returns the script type and the extracted payloads; unmatched
        tokens give (ScriptType.UNKNOWN, []). When strict is True, every
        template push must use the shortest possible encoding.
    """
    tokens = list(tokens)

    for script_type, matcher in templates:
        try:
            return (script_type, matcher(tokens, strict))
        except NoTemplateMatch:
            continue

    return (ScriptType.UNKNOWN, [])

def script2addresses(script: bytes|str, network: str|Network|Mapping|None = None,
                     strict: bool = False) -> ClassificationResult:
    """Classify an output script and derive the addresses it pays to.
        The script may be bytes or a hex str; anything else, and any
        script with a truncated push, classifies as unknown. The
        network defaults to mainnet; an unresolvable network also
        classifies as unknown. When strict is True, non-minimal pushes
        disqualify a template.
    """
    try:
        network = get_network(network)
    except (ValueError, TypeError) as e:
        logger.debug('network rejected: %s', e)
        return ClassificationResult()

    try:
        script = normalize_script(script)
        tokens = list(decode_script(script))
    except InvalidInputType as e:
        logger.debug('script rejected: %s', e)
        return ClassificationResult()
    except MalformedEncoding as e:
        logger.debug('malformed script %s: %s', script.hex(), e)
        return ClassificationResult()

    script_type, payloads = match_template(tokens, bool(strict))

    if script_type is ScriptType.UNKNOWN:
        logger.debug('no template matched script %s', script.hex())
        return ClassificationResult()

    logger.debug('script %s classified as %s', script.hex(), script_type)
    role = _address_roles.get(script_type)
    addresses = tuple(
        encode_address(payload, role, network) for payload in payloads
    )

    return ClassificationResult(script_type, addresses)
