import secrets


def token() -> str:
    return secrets.token_hex(16)
