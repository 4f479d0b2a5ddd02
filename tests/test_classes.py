from context import classes, errors, opcodes
import unittest


class TestTape(unittest.TestCase):
    def test_Tape_read_returns_bytes(self):
        tape = classes.Tape(b'some data')
        read = tape.read(4)
        assert type(read) is bytes
        assert read == b'some'
        assert tape.pointer == 4

    def test_Tape_read_without_moving_pointer(self):
        tape = classes.Tape(b'some data')
        assert tape.read(4, move_pointer=False) == b'some'
        assert tape.pointer == 0

    def test_Tape_raises_error_if_remaining_tape_too_short(self):
        tape = classes.Tape(b'some data')

        with self.assertRaises(errors.MalformedEncoding) as e:
            tape.read(20)

        assert tape.read(9) == b'some data'
        with self.assertRaises(errors.MalformedEncoding) as e:
            tape.read(1)

    def test_Tape_read_uint_is_little_endian(self):
        tape = classes.Tape(b'\x01\x02\x03\x04\x05\x06\x07')
        assert tape.read_uint(1) == 1
        assert tape.read_uint(2) == 0x0302
        assert tape.read_uint(4) == 0x07060504
        assert tape.has_terminated()

    def test_Tape_has_terminated_returns_correct_bool(self):
        tape = classes.Tape(b'some data')
        assert tape.has_terminated() is False

        tape.read(9)
        assert tape.has_terminated() is True



class TestTokens(unittest.TestCase):
    def test_Opcode_name(self):
        assert classes.Opcode(opcodes.OpCodes.OP_DUP).name == 'OP_DUP'
        assert classes.Opcode(0xac).name == 'OP_CHECKSIG'
        assert classes.Opcode(0xff).name == 'OP_UNKNOWN_0xff'

    def test_Opcode_small_int(self):
        assert classes.Opcode(opcodes.OpCodes.OP_1).small_int == 1
        assert classes.Opcode(opcodes.OpCodes.OP_16).small_int == 16
        assert classes.Opcode(opcodes.OpCodes.OP_0).small_int is None
        assert classes.Opcode(opcodes.OpCodes.OP_1NEGATE).small_int is None
        assert classes.Opcode(opcodes.OpCodes.OP_NOP).small_int is None

    def test_Opcode_and_Data_compare_by_value(self):
        assert classes.Opcode(0x76) == classes.Opcode(0x76)
        assert classes.Data(b'ab') == classes.Data(b'ab', classes.PushEncoding.DIRECT)
        assert classes.Data(b'ab') != classes.Data(b'ab', classes.PushEncoding.PUSHDATA1)

    def test_PushEncoding_minimal_for(self):
        minimal_for = classes.PushEncoding.minimal_for
        assert minimal_for(1) is classes.PushEncoding.DIRECT
        assert minimal_for(75) is classes.PushEncoding.DIRECT
        assert minimal_for(76) is classes.PushEncoding.PUSHDATA1
        assert minimal_for(255) is classes.PushEncoding.PUSHDATA1
        assert minimal_for(256) is classes.PushEncoding.PUSHDATA2
        assert minimal_for(0xffff) is classes.PushEncoding.PUSHDATA2
        assert minimal_for(0x10000) is classes.PushEncoding.PUSHDATA4

    def test_Data_is_minimal(self):
        assert classes.Data(b'\x00' * 20).is_minimal()
        assert not classes.Data(b'\x00' * 20, classes.PushEncoding.PUSHDATA1).is_minimal()
        assert not classes.Data(b'\x00' * 20, classes.PushEncoding.PUSHDATA2).is_minimal()
        assert classes.Data(b'\x00' * 80, classes.PushEncoding.PUSHDATA1).is_minimal()
        assert not classes.Data(b'\x00' * 80, classes.PushEncoding.PUSHDATA4).is_minimal()
        assert len(classes.Data(b'\x00' * 80)) == 80


class TestResults(unittest.TestCase):
    def test_ScriptType_compares_to_str(self):
        assert classes.ScriptType.PUBKEY == 'pubkey'
        assert str(classes.ScriptType.UNKNOWN) == 'unknown'
        assert classes.ScriptType('multisig') is classes.ScriptType.MULTISIG

    def test_ClassificationResult_defaults_to_unknown(self):
        result = classes.ClassificationResult()
        assert result.type is classes.ScriptType.UNKNOWN
        assert result.addresses == ()
        assert result.to_dict() == {'type': 'unknown', 'addresses': []}

    def test_ClassificationResult_to_dict(self):
        result = classes.ClassificationResult(
            classes.ScriptType.MULTISIG, ('1abc', '1abc')
        )
        assert result.to_dict() == {
            'type': 'multisig',
            'addresses': ['1abc', '1abc'],
        }


if __name__ == '__main__':
    unittest.main()
