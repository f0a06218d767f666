"""Domain service combining sub-check results into a single verdict."""

from typing import Iterable, Mapping, Union

from health_probes.domain.entities.health import ProbeStatus

SubResult = Union[ProbeStatus, str, bool]


def _is_up(result: SubResult) -> bool:
    if isinstance(result, ProbeStatus):
        return result is ProbeStatus.UP
    if isinstance(result, bool):
        return result
    if isinstance(result, str):
        return ProbeStatus(result.upper()) is ProbeStatus.UP
    raise TypeError(f"Unsupported sub-result: {result!r}")


def aggregate_status(
    sub_results: Union[Mapping[str, SubResult], Iterable[SubResult]],
) -> ProbeStatus:
    """
    Combine sub-results with a strict conjunction.

    The aggregate is UP only when every sub-result is UP (or ``True``).
    Status labels are parsed as ``ProbeStatus``; an unknown label raises
    ``ValueError`` and any other type raises ``TypeError``.
    There is no weighting and no quorum; an empty set of sub-results is UP.

    Args:
        sub_results: Named sub-results, or a plain iterable of them.

    Returns:
        ProbeStatus: The aggregate status.
    """
    values = sub_results.values() if isinstance(sub_results, Mapping) else sub_results
    # Evaluate every entry; callers record each sub-result independently.
    outcomes = [_is_up(value) for value in values]
    return ProbeStatus.UP if all(outcomes) else ProbeStatus.DOWN
