import pytest

from casper_ledger import keys
from casper_ledger.cl_types import U512, CLType, CLValue, PublicKey, PublicKeyTag, RuntimeArgs
from casper_ledger.deploy import Deploy, ModuleBytes, Transfer

SECRET = bytes(range(1, 33))


def new_deploy():
    payment = ModuleBytes(b"", RuntimeArgs([("amount", CLValue.from_t(1, U512))]))
    session = Transfer(RuntimeArgs([
        ("amount", CLValue.from_t(1, U512)),
        ("target", CLValue.from_t(bytes(32), CLType.byte_array(32))),
    ]))
    account = keys.public_key(PublicKeyTag.ED25519, SECRET)
    return Deploy.new(account, 0, 1000, 1, [], "casper-test", payment, session)


@pytest.mark.parametrize("tag, length", [(PublicKeyTag.ED25519, 32), (PublicKeyTag.SECP256K1, 33)])
def test_public_key_sizes(tag, length):
    key = keys.public_key(tag, SECRET)
    assert key.tag == tag
    assert len(key.raw) == length
    assert keys.is_valid_public_key(key)


@pytest.mark.parametrize("tag", [PublicKeyTag.ED25519, PublicKeyTag.SECP256K1])
def test_sign_and_check(tag):
    message = b"some deploy hash"
    signature = keys.sign(tag, SECRET, message)
    key = keys.public_key(tag, SECRET)
    assert keys.check_signature(key, message, signature)
    assert not keys.check_signature(key, b"another message", signature)


def test_secp256k1_signature_is_deterministic():
    first = keys.sign(PublicKeyTag.SECP256K1, SECRET, b"message")
    assert first == keys.sign(PublicKeyTag.SECP256K1, SECRET, b"message")


def test_mismatched_algorithm():
    signature = keys.sign(PublicKeyTag.ED25519, SECRET, b"message")
    key = keys.public_key(PublicKeyTag.SECP256K1, SECRET)
    assert not keys.check_signature(key, b"message", signature)


def test_invalid_secp256k1_point():
    assert not keys.is_valid_public_key(PublicKey.secp256k1(bytes([5] + [0xff] * 32)))


def test_system_key_has_no_curve():
    with pytest.raises(ValueError):
        keys.signing_key(PublicKeyTag.SYSTEM, SECRET)


def test_approve_deploy():
    deploy = keys.approve(new_deploy(), PublicKeyTag.ED25519, SECRET)
    assert len(deploy.approvals) == 1
    assert deploy.approvals[0].signer == deploy.header.account
    assert keys.check_approvals(deploy)
    assert deploy.has_valid_hashes()
