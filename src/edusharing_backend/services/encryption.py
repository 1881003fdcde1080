import logging
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

logger = logging.getLogger(__name__)


def load_repository_public_key(public_key_pem: str) -> RSAPublicKey:
    key = serialization.load_pem_public_key(public_key_pem.encode("utf-8"))
    if not isinstance(key, RSAPublicKey):
        raise TypeError("Repository public key is not an RSA key")
    return key


def encrypt_with_repo_key(data: str, public_key_pem: str) -> bytes:
    """
    Encrypt ``data`` with the repository's public key (RSA, PKCS#1 v1.5).

    Returns empty bytes if the key cannot be loaded or the data cannot be
    encrypted, the caller ends up with an unusable token in that case.
    """
    try:
        key = load_repository_public_key(public_key_pem or "")
        return key.encrypt(data.encode("utf-8"), padding.PKCS1v15())
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.warning(f"Could not encrypt with repository public key: {e}")
        return b""
