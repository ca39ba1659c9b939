# acctscout/verifier/local_part_engine.py
import re

MAX_LOCAL_PART_LEN = 64

# RFC 5322 atext, ASCII only
ATOM_REGEX = re.compile(r"[A-Za-z0-9!#$%&'*+\-/=?^_`{|}~]+")

_PRINTABLE = frozenset(chr(c) for c in range(0x20, 0x7F))
QTEXT = _PRINTABLE - {'"', "\\"}
QUOTED_PAIR_CHARS = _PRINTABLE | {"\t"}


def octet_length(value: str) -> int:
    return len(value.encode("utf-8", errors="surrogatepass"))


def is_dot_atom(value: str) -> bool:
    # empty atoms cover leading, trailing and doubled dots
    return all(ATOM_REGEX.fullmatch(atom) for atom in value.split("."))


def is_quoted_string(value: str) -> bool:
    """
    Single pass over a double-quoted local-part.
    The closing quote must be the last character; a backslash escapes
    exactly one following character and can't swallow the closing quote.
    """
    if len(value) < 2 or value[0] != '"' or value[-1] != '"':
        return False

    end = len(value) - 1
    i = 1
    while i < end:
        ch = value[i]
        if ch == "\\":
            if i + 1 >= end or value[i + 1] not in QUOTED_PAIR_CHARS:
                return False
            i += 2
            continue
        if ch not in QTEXT:
            return False
        i += 1
    return True


def is_valid_local_part(candidate: str) -> bool:
    if not isinstance(candidate, str) or not candidate:
        return False
    # char count is a lower bound on octets, so this rejects huge input cheaply
    if len(candidate) > MAX_LOCAL_PART_LEN or octet_length(candidate) > MAX_LOCAL_PART_LEN:
        return False
    if candidate.startswith('"'):
        return is_quoted_string(candidate)
    return is_dot_atom(candidate)
