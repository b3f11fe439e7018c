"""Key derivation, challenge digests and bond-key ciphers."""

from __future__ import annotations

import hashlib
import hmac

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

_DIGEST_LABELS = {
    1: b"digest-secret-v1",
    4: b"digest-secret-v1",
    2: b"digest-secret-v2",
}
_DEFAULT_DIGEST_LABEL = b"digest-secret-v3"
_GCM = 0x01


def _prefix(value: bytes, size: int, what: str) -> bytes:
    value = bytes(value)
    if len(value) < size:
        raise ValueError(f"{what} must be at least {size} bytes")
    return value[:size]


def create_secret_key(device_mac: str) -> bytes:
    """Derive the 16-byte per-device key from its address."""
    return hashlib.sha256(b"HuaweiBand9" + device_mac.encode()).digest()[:16]


def digest_challenge(auth_version: int, key: bytes | None, nonce: bytes, auth_algo: int) -> bytes:
    """Compute the 64-byte challenge digest: response (32) then session key material."""
    stage_key = _DIGEST_LABELS.get(auth_version, _DEFAULT_DIGEST_LABEL)
    if key is not None:
        key_hash = hashlib.sha256(key).digest()
        stage_key = bytes(a ^ b for a, b in zip(stage_key, key_hash))
    nonce = bytes(nonce)
    if auth_algo == 0x01 and auth_version == 0x02:
        return hashlib.pbkdf2_hmac("sha256", stage_key, nonce, 1000, dklen=64)
    step1 = hmac.new(stage_key, nonce, hashlib.sha256).digest()
    step2 = hmac.new(step1, nonce, hashlib.sha256).digest()
    return step2 + step1


def encrypt_bond_key(encrypt_method: int, data: bytes, key: bytes, iv: bytes) -> bytes:
    """Encrypt with AES-128-GCM (method 1) or AES-128-CBC with PKCS#7."""
    key16 = _prefix(key, 16, "key")
    if encrypt_method == _GCM:
        return AESGCM(key16).encrypt(_prefix(iv, 12, "iv"), bytes(data), None)
    padder = padding.PKCS7(128).padder()
    padded = padder.update(bytes(data)) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key16), modes.CBC(_prefix(iv, 16, "iv"))).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt_pin_code(encrypt_method: int, data: bytes, key: bytes, iv: bytes) -> bytes:
    """Inverse of :func:`encrypt_bond_key`; raises ``ValueError`` on bad input."""
    key16 = _prefix(key, 16, "key")
    if encrypt_method == _GCM:
        try:
            return AESGCM(key16).decrypt(_prefix(iv, 12, "iv"), bytes(data), None)
        except InvalidTag:
            raise ValueError("authentication tag mismatch") from None
    decryptor = Cipher(algorithms.AES(key16), modes.CBC(_prefix(iv, 16, "iv"))).decryptor()
    padded = decryptor.update(bytes(data)) + decryptor.finalize()
    unpadder = padding.PKCS7(128).unpadder()
    return unpadder.update(padded) + unpadder.finalize()


def derive_hichain_session_key(psk: bytes, rand_self: bytes, rand_peer: bytes, info: bytes) -> bytes:
    """HKDF-SHA256 with salt ``rand_self + rand_peer``, producing 32 bytes."""
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=bytes(rand_self) + bytes(rand_peer),
        info=bytes(info),
    )
    return hkdf.derive(bytes(psk))