import secrets
import string


ALPHABET = string.ascii_lowercase + string.digits


def id_generator(prefix: str, length: int):
    """Return a factory producing ids like ``<prefix>_<random chars>``."""
    def generate() -> str:
        suffix = ''.join(secrets.choice(ALPHABET) for _ in range(length))
        return f"{prefix}_{suffix}"
    return generate
