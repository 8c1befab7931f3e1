from passlib.context import CryptContext

# argon2 for new hashes; older schemes listed here would be upgraded on login
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def verify_and_upgrade(password: str, hashed: str) -> tuple[bool, str | None]:
    """Check a password; also return a fresh hash when the stored one is outdated"""
    return pwd_context.verify_and_update(password, hashed)
