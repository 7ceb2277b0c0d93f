"""Session payload encryption using Fernet symmetric encryption."""

from cryptography.fernet import Fernet


class TokenEncryptor:
    """Encrypts and decrypts session payloads using Fernet symmetric encryption.

    Fernet ciphertext is authenticated, so a tampered cookie fails to decrypt
    instead of yielding a forged credential. ``decrypt`` also enforces a
    maximum age when ``ttl_seconds`` is given.
    """

    def __init__(self, key: str) -> None:
        self._fernet = Fernet(key.encode())

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a plaintext string, returning base64-encoded ciphertext."""
        return self._fernet.encrypt(plaintext.encode()).decode()

    def decrypt(self, ciphertext: str, ttl_seconds: int | None = None) -> str:
        """Decrypt a base64-encoded ciphertext string, returning the original plaintext.

        Raises:
            cryptography.fernet.InvalidToken: If the ciphertext is tampered,
                encrypted with another key, or older than *ttl_seconds*.
        """
        return self._fernet.decrypt(ciphertext.encode(), ttl=ttl_seconds).decode()
