import re

MAX_USERNAME_LENGTH = 39

# alphanumerics and single hyphens, never leading or trailing
USERNAME_PATTERN = re.compile(r"^(?!-)(?!.*--)[a-zA-Z0-9-]+(?<!-)$")


def is_valid_username(name: str | None) -> bool:
    if name is None or not name.strip():
        return False
    return len(name) <= MAX_USERNAME_LENGTH and USERNAME_PATTERN.fullmatch(name) is not None
