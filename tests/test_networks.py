from context import networks
import unittest


class TestNetworks(unittest.TestCase):
    def test_get_network_defaults_to_mainnet(self):
        network = networks.get_network()
        assert network is networks.MAINNET
        assert network.pubkeyhash_version == 0x00
        assert network.scripthash_version == 0x05

    def test_get_network_by_name(self):
        assert networks.get_network('mainnet') is networks.MAINNET
        assert networks.get_network('TestNet') is networks.TESTNET
        assert networks.get_network('regtest').pubkeyhash_version == 0x6f
        assert networks.get_network('litecoin').scripthash_version == 0x32
        assert networks.get_network('dogecoin').pubkeyhash_version == 0x1e

    def test_get_network_returns_Network_verbatim(self):
        network = networks.Network(0x01, 0x02)
        assert networks.get_network(network) is network
        assert network.name == 'custom'

    def test_get_network_from_mapping(self):
        for mapping in (
            {'pubkeyhash_version': 0x30, 'scripthash_version': 0x32},
            {'pubKeyHashVersion': 0x30, 'scriptHashVersion': 0x32},
            {'pubKeyHash': 0x30, 'scriptHash': 0x32},
        ):
            network = networks.get_network(mapping)
            assert network.pubkeyhash_version == 0x30
            assert network.scripthash_version == 0x32

    def test_get_network_errors(self):
        with self.assertRaises(ValueError) as e:
            networks.get_network('nonexistent')
        assert str(e.exception) == 'unknown network: nonexistent'

        with self.assertRaises(ValueError):
            networks.get_network({'pubkeyhash_version': 0})

        with self.assertRaises(ValueError):
            networks.get_network({'pubKeyHash': 256, 'scriptHash': 5})

        with self.assertRaises(TypeError):
            networks.get_network(5)

    def test_NETWORKS_is_read_only(self):
        with self.assertRaises(TypeError):
            networks.NETWORKS['fake'] = networks.Network(0x01, 0x02)

        assert 'fake' not in networks.NETWORKS

    def test_Network_is_frozen(self):
        with self.assertRaises(AttributeError):
            networks.MAINNET.pubkeyhash_version = 0x6f


if __name__ == '__main__':
    unittest.main()
