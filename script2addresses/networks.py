from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
from .errors import tert, vert


@dataclass(frozen=True)
class Network:
    """Version bytes prepended to hashes when encoding addresses."""
    pubkeyhash_version: int
    scripthash_version: int
    name: str = 'custom'

    def __post_init__(self) -> None:
        for version in (self.pubkeyhash_version, self.scripthash_version):
            tert(type(version) is int, 'version must be int')
            vert(0 <= version <= 0xff, 'version must be in 0-255')


MAINNET = Network(0x00, 0x05, 'mainnet')
TESTNET = Network(0x6f, 0xc4, 'testnet')
REGTEST = Network(0x6f, 0xc4, 'regtest')
LITECOIN = Network(0x30, 0x32, 'litecoin')
DOGECOIN = Network(0x1e, 0x16, 'dogecoin')

NETWORKS: Mapping[str, Network] = MappingProxyType({
    net.name: net for net in (MAINNET, TESTNET, REGTEST, LITECOIN, DOGECOIN)
})

# accepted key pairs for networks given as a mapping
_mapping_keys = (
    ('pubkeyhash_version', 'scripthash_version'),
    ('pubKeyHashVersion', 'scriptHashVersion'),
    ('pubKeyHash', 'scriptHash'),
)


def get_network(network: str|Network|Mapping|None = None) -> Network:
    """Resolve a network argument: None means mainnet; a str is looked
        up by name; a Network is returned as is; a mapping must carry
        the pubkeyhash and scripthash version bytes. Raises ValueError
        for unknown names and TypeError for unsupported types.
    """
    if network is None:
        return MAINNET

    if isinstance(network, Network):
        return network

    if isinstance(network, str):
        vert(network.lower() in NETWORKS, f'unknown network: {network}')
        return NETWORKS[network.lower()]

    tert(isinstance(network, Mapping),
         'network must be a str, Network, or mapping of version bytes')

    for pkh_key, sh_key in _mapping_keys:
        if pkh_key in network and sh_key in network:
            return Network(
                network[pkh_key],
                network[sh_key],
                network.get('name', 'custom'),
            )

    raise ValueError('network mapping must include pubkeyhash and scripthash versions')
