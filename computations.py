"""
Split computation for SpillPay
"""
from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from models import Participant, Share, SplitOutcome

logger = logging.getLogger(__name__)


def _weight(p: Participant) -> float:
    """Order used for splitting; negative orders count as 0"""
    return max(0.0, float(p.order))


def total_order(participants: Sequence[Participant]) -> float:
    """Sum of all participants' orders"""
    return sum(_weight(p) for p in participants)


def shared_portion(participants: Sequence[Participant], shared_item_cost: float) -> float:
    """Shared item cost carried by each participant (equal split)"""
    if not participants:
        return 0.0
    return max(0.0, shared_item_cost) / len(participants)


def compute_shares(
    participants: Sequence[Participant],
    shared_item_cost: float,
    total: float
) -> Optional[List[Share]]:
    """
    Compute each participant's share of total.

    The shared item cost is spread evenly over everyone and added to each
    participant's own order before taking their proportion of
    (total order + shared item cost).
    Returns None when there is no valid distribution (total order is 0).
    Shares that are not positive are left out.
    """
    if total <= 0:
        raise ValueError(f"total must be positive, got {total!r}")

    t_order = total_order(participants)
    if t_order <= 0 or not participants:
        logger.debug("No valid distribution: total order %s over %d participants",
                     t_order, len(participants))
        return None

    # a negative shared item cost counts as 0, unlike the raw formula
    shared = max(0.0, shared_item_cost)
    per_head = shared_portion(participants, shared)
    denominator = t_order + shared

    shares = []
    for p in participants:
        amount = ((_weight(p) + per_head) / denominator) * total
        if amount > 0:
            shares.append(Share(participant=p, amount=amount, shared_portion=per_head))
    return shares


def summarize_outcome(
    participants: Sequence[Participant],
    shared_item_cost: float,
    total: float
) -> SplitOutcome:
    """Run compute_shares and wrap the result for display/export"""
    shares = compute_shares(participants, shared_item_cost, total)
    return SplitOutcome(total=total, shared_item_cost=max(0.0, shared_item_cost), shares=shares,
                        participant_count=len(participants))
