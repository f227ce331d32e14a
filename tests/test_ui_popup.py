"""Tests for submenu popup geometry and drawing."""

import pytest

from ztui.exceptions import GeometryInfeasibleError
from ztui.menu.model import MenuModel
from ztui.menu.navigator import MenuBar
from ztui.ui import popup


class TestComputePopupGeometry:
    def test_box_size_from_items(self):
        geometry = popup.compute_popup_geometry(["A", "BB", "CCC"], 5, 24, 80)
        assert geometry.width == 7
        assert geometry.height == 5
        assert (geometry.y, geometry.x) == (1, 5)
        assert geometry.visible_rows == 3
        assert geometry.truncated is False

    @pytest.mark.parametrize("anchor", [None, -4, 0, 1])
    def test_anchor_clamped_to_first_content_column(self, anchor):
        geometry = popup.compute_popup_geometry(["Item"], anchor, 24, 80)
        assert geometry.x == 1

    def test_shifted_left_to_fit_right_border(self):
        # Rightmost content column for 80 columns is 77.
        geometry = popup.compute_popup_geometry(["A", "BB", "CCC"], 75, 24, 80)
        assert geometry.x + geometry.width - 1 == 77
        assert geometry.x == 71

    def test_box_that_exactly_fits_is_not_moved(self):
        geometry = popup.compute_popup_geometry(["A", "BB", "CCC"], 71, 24, 80)
        assert geometry.x == 71

    def test_shift_never_goes_below_first_column(self):
        geometry = popup.compute_popup_geometry(["X" * 60], 10, 24, 40)
        assert geometry.x == 1

    def test_height_clipped_to_bottom_border(self):
        items = [f"Item {n}" for n in range(10)]
        # Bottom content row for 8 rows is 5, so rows 1-5 are available.
        geometry = popup.compute_popup_geometry(items, 2, 8, 80)
        assert geometry.height == 5
        assert geometry.requested_height == 12
        assert geometry.visible_rows == 3
        assert geometry.truncated is True

    def test_infeasible_height_raises(self):
        with pytest.raises(GeometryInfeasibleError) as excinfo:
            popup.compute_popup_geometry(["A", "B"], 2, 4, 80)
        assert excinfo.value.height == 1


class TestDrawSubmenu:
    def _open_menubar(self, children="New Open Save --- Quit"):
        menubar = MenuBar(MenuModel.from_mapping({"File": children}))
        menubar.open_submenu()
        return menubar

    def test_noop_when_closed(self, fake_surface, menubar):
        assert popup.draw_submenu(fake_surface, menubar, 2) is None
        assert fake_surface.box_calls == []

    def test_noop_when_open_without_items(self, fake_surface, menubar):
        menubar.submenu.is_open = True
        assert popup.draw_submenu(fake_surface, menubar, 2) is None
        assert fake_surface.box_calls == []

    def test_draws_box_and_items(self, fake_surface):
        menubar = self._open_menubar()
        geometry = popup.draw_submenu(fake_surface, menubar, 2)
        assert fake_surface.box_calls == [(1, 2, 7, 8)]
        assert geometry.width == 8
        assert fake_surface.row_text(1)[2:10] == "┌──────┐"
        assert fake_surface.row_text(2)[2:10] == "│ New  │"
        assert fake_surface.row_text(5)[2:10] == "│ ---  │"
        assert fake_surface.row_text(6)[2:10] == "│ Quit │"
        assert fake_surface.row_text(7)[2:10] == "└──────┘"

    def test_selected_item_highlighted(self, fake_surface):
        menubar = self._open_menubar()
        menubar.submenu.selected_index = 1
        popup.draw_submenu(
            fake_surface,
            menubar,
            2,
            attr_normal="default/default",
            attr_active="white/blue",
        )
        assert {fake_surface.attr_at(3, col) for col in range(3, 9)} == {"white/blue"}
        assert {fake_surface.attr_at(2, col) for col in range(3, 9)} == {"default/default"}
        assert fake_surface.attribute == "default/default"

    def test_clipped_popup_draws_visible_rows_only(self, surface_factory):
        surface = surface_factory(rows=6, cols=80)
        menubar = self._open_menubar()
        geometry = popup.draw_submenu(surface, menubar, 2)
        assert geometry.height == 3
        assert surface.row_text(2)[2:10] == "│ New  │"
        assert surface.row_text(3)[2:10] == "└──────┘"

    def test_infeasible_geometry_force_closes(self, surface_factory, messages_at):
        surface = surface_factory(rows=4, cols=80)
        menubar = self._open_menubar()
        assert popup.draw_submenu(surface, menubar, 2) is None
        assert menubar.submenu.is_open is False
        assert menubar.consume_clear_request() is True
        assert surface.box_calls == []
        assert len(messages_at("ERROR")) == 1
