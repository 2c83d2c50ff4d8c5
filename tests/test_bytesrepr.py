import pytest

from casper_ledger import bytesrepr
from casper_ledger.bytesrepr import BytesreprError, Reader
from casper_ledger.cl_types import (
    BOOL,
    I32,
    KEY,
    PUBLIC_KEY,
    STRING,
    U8,
    U64,
    U512,
    UREF,
    AccessRights,
    CLType,
    CLTypeTag,
    CLValue,
    Err,
    Key,
    KeyTag,
    Ok,
    PublicKey,
    RuntimeArgs,
    URef,
)


@pytest.mark.parametrize("value, expected", [
    (0, "00"),
    (1, "0101"),
    (256, "020001"),
    (100_000_000, "0400e1f505"),
])
def test_big_uint(value, expected):
    assert bytesrepr.big_uint(value, 64).hex() == expected
    assert Reader(bytes.fromhex(expected)).big_uint(64) == value


def test_big_uint_overflow():
    with pytest.raises(BytesreprError):
        bytesrepr.big_uint(2 ** 128, 16)
    with pytest.raises(BytesreprError):
        bytesrepr.big_uint(-1, 16)


def test_string_is_length_prefixed():
    assert bytesrepr.string("abc") == b"\x03\x00\x00\x00abc"


def test_reader_early_end():
    reader = Reader(b"\x01\x00")
    with pytest.raises(BytesreprError):
        reader.u32()


def test_reader_trailing_bytes():
    reader = Reader(b"\x01\x02")
    reader.u8()
    with pytest.raises(BytesreprError):
        reader.finish()


def test_reader_invalid_bool():
    with pytest.raises(BytesreprError):
        Reader(b"\x02").bool()


@pytest.mark.parametrize("cl_type, value", [
    (BOOL, True),
    (I32, -10),
    (U64, 2 ** 64 - 1),
    (U512, 2 ** 512 - 1),
    (STRING, "sample-string"),
    (CLType.option(U8), None),
    (CLType.option(U8), 100),
    (CLType.list_of(PUBLIC_KEY), [PublicKey.ed25519(bytes([1] * 32))]),
    (CLType.byte_array(32), bytes([1] * 32)),
    (CLType.result(BOOL, I32), Ok(False)),
    (CLType.result(BOOL, I32), Err(-10)),
    (CLType.map_of(STRING, U64), [("one", 1)]),
    (CLType.tuple_of(U8, BOOL, STRING), (0, True, "tuple3")),
    (KEY, Key.era_info(3)),
    (UREF, URef(bytes([2] * 32), AccessRights.READ_ADD_WRITE)),
])
def test_cl_value_to_t(cl_type, value):
    cl_value = CLValue.from_t(value, cl_type)
    assert cl_value.to_t() == value
    reader = Reader(cl_value.to_bytes())
    assert CLValue.from_reader(reader) == cl_value
    reader.finish()


def test_cl_value_bytes():
    cl_value = CLValue.from_t(7, U8)
    # u32 length, data, type tag
    assert cl_value.to_bytes() == b"\x01\x00\x00\x00\x07\x03"


def test_cl_type_str():
    assert str(CLType.option(U8)) == "Option(U8)"
    assert str(CLType.byte_array(32)) == "ByteArray(32)"
    assert str(CLType.map_of(STRING, U64)) == "Map(String, U64)"


def test_cl_type_from_reader():
    cl_type = CLType.result(CLType.list_of(KEY), CLType.byte_array(4))
    assert CLType.from_reader(Reader(cl_type.to_bytes())) == cl_type


def test_unknown_cl_type_tag():
    with pytest.raises(BytesreprError):
        CLType.from_reader(Reader(b"\xff"))


def test_from_t_wrong_value():
    with pytest.raises(BytesreprError):
        CLValue.from_t("not a number", U64)


def test_byte_array_length_mismatch():
    with pytest.raises(BytesreprError):
        CLValue.from_t(bytes(3), CLType.byte_array(32))


def test_any_cannot_be_deserialized():
    cl_value = CLValue(CLType(CLTypeTag.ANY), b"\x01")
    with pytest.raises(BytesreprError):
        cl_value.to_t()


def test_key_formatted_strings():
    addr = bytes([1] * 32)
    assert Key.account(addr).to_formatted_string() == "account-hash-" + addr.hex()
    assert Key.hash(addr).to_formatted_string() == "hash-" + addr.hex()
    assert Key.era_info(12).to_formatted_string() == "era-12"
    uref = URef(addr, AccessRights.READ_ADD_WRITE)
    assert Key.uref(uref).to_formatted_string() == f"uref-{addr.hex()}-007"


@pytest.mark.parametrize("key", [
    Key.account(bytes([1] * 32)),
    Key(KeyTag.DICTIONARY, bytes([9] * 32)),
    Key.era_info(0),
    Key.uref(URef(bytes([4] * 32), AccessRights.READ)),
])
def test_key_from_formatted_str(key):
    assert Key.from_formatted_str(key.to_formatted_string()) == key


@pytest.mark.parametrize("text", ["sample-string", "hash-00", "uref-00-007", "era-x"])
def test_key_from_formatted_str_invalid(text):
    with pytest.raises(ValueError):
        Key.from_formatted_str(text)


def test_public_key_lengths():
    with pytest.raises(ValueError):
        PublicKey.ed25519(bytes(33))
    key = PublicKey.secp256k1(bytes([2] + [1] * 32))
    assert PublicKey.from_hex(key.to_hex()) == key
    assert PublicKey.system().to_bytes() == b"\x00"


def test_runtime_args_keep_insertion_order():
    args = RuntimeArgs([("b", CLValue.from_t(1, U8)), ("a", CLValue.from_t(2, U8))])
    assert list(args) == ["b", "a"]
    assert [name for name, _ in args.sorted_items()] == ["a", "b"]
    reader = Reader(args.to_bytes())
    assert RuntimeArgs.from_reader(reader) == args


def test_runtime_args_without_does_not_mutate():
    args = RuntimeArgs([("amount", CLValue.from_t(1, U512)), ("id", CLValue.from_t(2, U64))])
    filtered = args.without("amount")
    assert "amount" not in filtered
    assert "amount" in args
    assert len(args) == 2
