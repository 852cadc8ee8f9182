"""Tests for role resolution."""

from pyboothpatch.system.roles import by_x, resolve_roles


class TestResolveRoles:
    def test_groups(self, place):
        mixer = place("djm-900")
        deck = place("sl-1200")
        top = place("qsc-k12-2")
        sub = place("qsc-ks118")
        phones = place("senn-hd25")
        strip = place("pwr-strip")
        ghost = place("mystery-box")

        roles = resolve_roles([mixer, deck, top, sub, phones, strip, ghost])

        assert roles.hub == mixer
        assert roles.players == (deck,)
        assert roles.tops == (top,)
        assert roles.subs == (sub,)
        assert roles.others == (phones, strip, ghost)
        assert roles.power_strip == strip
        assert roles.speakers == (top, sub)

    def test_hub_is_first_in_list_order(self, place):
        s4 = place("traktor-s4", x=900)
        mixer = place("djm-900", x=0)
        assert resolve_roles([s4, mixer]).hub == s4

    def test_first_strip_wins(self, place):
        first, second = place("pwr-strip"), place("pwr-strip")
        roles = resolve_roles([first, second])
        assert roles.power_strip == first

    def test_empty(self):
        roles = resolve_roles([])
        assert roles.hub is None
        assert roles.power_strip is None


def test_by_x_is_stable(place):
    a = place("cdj-3000", x=100)
    b = place("cdj-3000", x=50)
    c = place("cdj-3000", x=100)
    assert by_x([a, b, c]) == (b, a, c)
