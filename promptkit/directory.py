"""Path truncation for directory display."""


def truncate(dir_string: str, length: int) -> str:
    """Keep only the last ``length`` components of a slash-separated path.

    A length of 0 leaves the path untouched.
    """
    if length == 0:
        return dir_string

    components = dir_string.split("/")
    # A leading "/" yields an empty first component that is not counted.
    if components[0] == "":
        components = components[1:]

    if len(components) <= length:
        return dir_string

    return "/".join(components[-length:])