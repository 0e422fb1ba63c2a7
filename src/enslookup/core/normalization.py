"""ENS name normalization."""

from ens_normalize import CurableSequence, DisallowedSequence, ens_normalize

from .exceptions import InvalidNameError


def normalize_name(name: str) -> str:
    """
    Normalize an ENS name to its canonical ENSIP-15 form.

    Surrounding whitespace is trimmed first; everything else (case folding,
    emoji, confusables, empty labels) is delegated to ``ens_normalize``.

    Args:
        name: Raw user input, e.g. "Vitalik.ETH"

    Returns:
        The normalized name, e.g. "vitalik.eth"

    Raises:
        InvalidNameError: If the name is empty or not normalizable
    """
    if not isinstance(name, str):
        raise InvalidNameError("ENS name must be a string", name=repr(name))

    trimmed = name.strip()
    if not trimmed:
        raise InvalidNameError("ENS name is required", name=name)

    try:
        normalized = ens_normalize(trimmed)
    except (CurableSequence, DisallowedSequence) as e:
        raise InvalidNameError(
            f"Invalid ENS name: {e}",
            name=name,
            details={"reason": str(e)},
        ) from e

    if not normalized:
        raise InvalidNameError("ENS name is required", name=name)

    return normalized

