import hashlib

from ecdsa import BadSignatureError, SigningKey, VerifyingKey, curves
from ecdsa.errors import MalformedPointError
from ecdsa.util import sigdecode_string, sigencode_string

from .cl_types import PublicKey, PublicKeyTag, Signature
from .deploy import Approval, Deploy


CURVES = {
    PublicKeyTag.ED25519: curves.Ed25519,
    PublicKeyTag.SECP256K1: curves.SECP256k1,
}


def _curve(tag: PublicKeyTag):
    if tag not in CURVES:
        raise ValueError(f"No curve for {tag.name} keys")
    return CURVES[tag]


def signing_key(tag: PublicKeyTag, secret: bytes) -> SigningKey:
    return SigningKey.from_string(secret, curve=_curve(tag))


def public_key(tag: PublicKeyTag, secret: bytes) -> PublicKey:
    vk = signing_key(tag, secret).get_verifying_key()
    if tag == PublicKeyTag.SECP256K1:
        return PublicKey.secp256k1(vk.to_string("compressed"))
    return PublicKey.ed25519(vk.to_string())


def sign(tag: PublicKeyTag, secret: bytes, message: bytes) -> Signature:
    sk = signing_key(tag, secret)
    if tag == PublicKeyTag.SECP256K1:
        raw = sk.sign_deterministic(message, hashfunc=hashlib.sha256, sigencode=sigencode_string)
    else:
        raw = sk.sign(message)
    return Signature(tag, raw)


def is_valid_public_key(key: PublicKey) -> bool:
    if key.tag == PublicKeyTag.SYSTEM:
        return True
    try:
        VerifyingKey.from_string(key.raw, curve=_curve(key.tag))
    except (MalformedPointError, ValueError):
        return False
    return True


def check_signature(key: PublicKey, message: bytes, signature: Signature) -> bool:
    if key.tag != signature.tag or key.tag == PublicKeyTag.SYSTEM:
        return False
    try:
        vk = VerifyingKey.from_string(key.raw, curve=_curve(key.tag))
        if key.tag == PublicKeyTag.SECP256K1:
            vk.verify(signature.raw, message, hashfunc=hashlib.sha256, sigdecode=sigdecode_string)
        else:
            vk.verify(signature.raw, message)
    except (BadSignatureError, MalformedPointError):
        return False
    return True


def approve(deploy: Deploy, tag: PublicKeyTag, secret: bytes) -> Deploy:
    approval = Approval(public_key(tag, secret), sign(tag, secret, deploy.hash))
    return deploy.with_approval(approval)


def check_approvals(deploy: Deploy) -> bool:
    return all(
        check_signature(approval.signer, deploy.hash, approval.signature)
        for approval in deploy.approvals
    )
