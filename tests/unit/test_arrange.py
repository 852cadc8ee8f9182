"""Tests for auto-arrange and view fitting."""

import pytest

from pyboothpatch.layout.arrange import arrange_positions, auto_arrange, fit_to_view
from pyboothpatch.model.constants import LayoutConfig

# ---------------------------------------------------------------------------
# Helper factories
# ---------------------------------------------------------------------------


def _positions(items):
    return arrange_positions(items)


def _center(pos, width):
    return pos[0] + width / 2


# ---------------------------------------------------------------------------
# Zones
# ---------------------------------------------------------------------------


class TestArrangeZones:
    def test_hub_centered_on_table(self, place):
        mixer = place("djm-900")
        pos = _positions([mixer])
        assert pos[mixer.instance_id] == (633.5, 150)
        assert _center(pos[mixer.instance_id], 333) == 800

    @pytest.mark.parametrize("mixer_first", [True, False])
    def test_hub_center_independent_of_order(self, place, mixer_first):
        mixer = place("djm-900", x=5000)
        decks = [place("cdj-3000"), place("cdj-3000")]
        items = [mixer, *decks] if mixer_first else [*decks, mixer]
        assert _positions(items)[mixer.instance_id] == (633.5, 150)

    def test_players_alternate_left_then_right(self, place):
        mixer = place("djm-900")
        decks = [place("cdj-3000") for _ in range(3)]
        pos = _positions([mixer, *decks])

        assert pos[decks[0].instance_id] == (284.5, 150)
        assert pos[decks[1].instance_id] == (986.5, 150)
        # Third deck continues outward on the left
        assert pos[decks[2].instance_id] == (284.5 - 20 - 329, 150)

    def test_players_without_hub_split_at_center(self, place):
        decks = [place("cdj-3000"), place("cdj-3000")]
        pos = _positions(decks)
        assert pos[decks[0].instance_id] == (471, 150)
        assert pos[decks[1].instance_id] == (800, 150)

    def test_secondary_hub_right_of_main(self, place):
        mixer = place("djm-900")
        rx3 = place("xdj-rx3")
        pos = _positions([mixer, rx3])
        assert pos[rx3.instance_id] == (986.5, 150)

    def test_tops_flank_table_raised(self, place):
        mixer = place("djm-900")
        tops = [place("jbl-irx112"), place("jbl-irx112")]
        pos = _positions([mixer, *tops])

        assert pos[tops[0].instance_id] == (103.5, 100)
        assert pos[tops[1].instance_id] == (1136.5, 100)

    def test_subs_on_floor(self, place):
        mixer = place("djm-900")
        subs = [place("jbl-prx818xlf"), place("jbl-prx818xlf")]
        pos = _positions([mixer, *subs])

        assert pos[subs[0].instance_id] == (-136.5, 600)
        assert pos[subs[1].instance_id] == (1136.5, 600)

    def test_others_past_right_subs(self, place):
        mixer = place("djm-900")
        subs = [place("jbl-prx818xlf"), place("jbl-prx818xlf")]
        phones = place("senn-hd25")
        strip = place("pwr-strip")
        pos = _positions([mixer, *subs, phones, strip])

        assert pos[phones.instance_id] == (1841.5, 150)
        assert pos[strip.instance_id] == (1841.5 + 180 + 20, 150)

    def test_others_without_right_subs(self, place):
        mixer = place("djm-900")
        sub = place("jbl-prx818xlf")
        phones = place("senn-hd25")
        pos = _positions([mixer, sub, phones])
        assert pos[phones.instance_id] == (1236.5, 150)

    def test_custom_config(self, place):
        mixer = place("djm-900")
        pos = arrange_positions([mixer], config=LayoutConfig(center_x=0, table_y=10))
        assert pos[mixer.instance_id] == (-166.5, 10)

    def test_unknown_device_not_positioned(self, place):
        ghost = place("mystery-box", x=12, y=34)
        assert ghost.instance_id not in _positions([place("djm-900"), ghost])


# ---------------------------------------------------------------------------
# auto_arrange
# ---------------------------------------------------------------------------


class TestAutoArrange:
    def test_empty(self):
        result = auto_arrange([])
        assert result.items == []
        assert result.view_fit is None

    def test_preserves_order_and_identity(self, place):
        decks = [place("cdj-3000"), place("cdj-3000")]
        mixer = place("djm-900")
        ghost = place("mystery-box", x=12, y=34)
        result = auto_arrange([*decks, mixer, ghost])

        assert [i.instance_id for i in result.items] == [
            decks[0].instance_id,
            decks[1].instance_id,
            mixer.instance_id,
            ghost.instance_id,
        ]
        assert result.items[3] == ghost
        assert all(a.device_id == b.device_id for a, b in zip(result.items, [*decks, mixer, ghost]))

    def test_returns_view_fit(self, place):
        result = auto_arrange([place("djm-900")])
        assert result.view_fit is not None
        assert 0.2 <= result.view_fit.scale <= 1.0


# ---------------------------------------------------------------------------
# fit_to_view
# ---------------------------------------------------------------------------


class TestFitToView:
    def test_scale_clamped_to_max(self, place):
        fit = fit_to_view([place("djm-900")])
        assert fit.scale == 1.0
        assert fit.pan_x == pytest.approx(473.5)
        assert fit.pan_y == pytest.approx(193)

    def test_scale_clamped_to_min(self, place):
        fit = fit_to_view([place("djm-900")], viewport=(100, 100))
        assert fit.scale == 0.2
        assert fit.pan_x == pytest.approx(50 - 166.5 * 0.2)

    def test_uses_face_height(self, place):
        fit = fit_to_view([place("djm-900", face="back")])
        assert fit.pan_y == pytest.approx(400 - 60)

    def test_wide_booth_scales_down(self, place):
        items = [place("djm-900", x=0), place("djm-900", x=3000)]
        fit = fit_to_view(items)
        assert fit.scale == pytest.approx(1280 / (3333 + 300))

    def test_unknown_only(self, place):
        assert fit_to_view([place("mystery-box")]) is None
