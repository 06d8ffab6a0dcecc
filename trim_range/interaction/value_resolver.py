"""Per-move value resolution for the pressed handle.

Given a touch X and the current model state, compute the new normalized and
committed value of one handle. The minimum gap is measured between the inner
edges of the two handle bodies, so the committed (time) values are expressed
over the track with both handle widths inset.
"""
from __future__ import annotations

from dataclasses import dataclass

from trim_range.geometry.mapping import TrackLayout
from trim_range.interaction.hit_testing import is_in_handle_range
from trim_range.model.range_model import RangeModel, clamp_unit
from trim_range.model.touch_session import Handle

DEFAULT_SNAP_TOLERANCE_SCALE = 0.5
DEFAULT_EDGE_SNAP_FRACTION = 2.0 / 3.0


@dataclass(frozen=True)
class ResolvedMove:
    value: float
    time_value: float
    collapsed: bool = False


def _unchanged(handle: Handle, model: RangeModel) -> ResolvedMove:
    if handle is Handle.MIN:
        return ResolvedMove(model.min_value, model.min_value_time)
    return ResolvedMove(model.max_value, model.max_value_time)


def resolve_handle_move(
    handle: Handle,
    touch_x: float,
    model: RangeModel,
    layout: TrackLayout,
    snap_tolerance_scale: float = DEFAULT_SNAP_TOLERANCE_SCALE,
    edge_snap_fraction: float = DEFAULT_EDGE_SNAP_FRACTION,
) -> ResolvedMove:
    """Resolve where ``handle`` lands for a touch at ``touch_x``.

    The model is only read. Degenerate geometry resolves to the current
    values.
    """

    inner_width = layout.inner_width
    if layout.usable_width <= 0 or inner_width <= 0:
        return _unchanged(handle, model)

    min_x = layout.to_screen(model.min_value)
    max_x = layout.to_screen(model.max_value)
    current_x = min_x if handle is Handle.MIN else max_x
    if is_in_handle_range(
        touch_x, current_x, layout.handle_half_width, snap_tolerance_scale
    ):
        return _unchanged(handle, model)

    min_gap = model.min_gap_px(layout.usable_width, layout.handle_width)
    edge_zone = layout.handle_width * edge_snap_fraction
    candidate = touch_x
    collapsed = False

    if handle is Handle.MIN:
        limit = max_x - 2 * layout.handle_width - min_gap
        if candidate > limit:
            collapsed = True
            candidate = limit
        if candidate - layout.left_edge < edge_zone:
            candidate = layout.left_edge
        time_value = (candidate - layout.left_edge) / inner_width
    else:
        limit = min_x + 2 * layout.handle_width + min_gap
        if candidate < limit:
            collapsed = True
            candidate = limit
        if layout.right_edge - candidate < edge_zone:
            candidate = layout.right_edge
        time_value = 1.0 - (layout.right_edge - candidate) / inner_width

    return ResolvedMove(
        value=clamp_unit(layout.to_normalized(candidate)),
        time_value=clamp_unit(time_value),
        collapsed=collapsed,
    )
