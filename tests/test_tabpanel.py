# tests/test_tabpanel.py
import unittest

from reconui import (
    Event,
    EventType,
    Interaction,
    Label,
    Layout,
    Panel,
    TabBarPlacement,
    TabPanel,
    Writer,
)


def render(component) -> str:
    w = Writer()
    component.render(w)
    return w.getvalue()


class TabPanelTestCase(unittest.TestCase):

    def make_panel(self, n: int) -> TabPanel:
        panel = TabPanel()
        self.selectors = []
        self.contents = []
        for i in range(n):
            selector, content = Label(f"tab{i}"), Label(f"content{i}")
            self.assertTrue(panel.add(selector, content))
            self.selectors.append(selector)
            self.contents.append(content)
        return panel

    def assertAligned(self, panel: TabPanel):
        self.assertEqual(panel.children_count(), panel.tab_bar.children_count())

    def assertSelectorStyles(self, panel: TabPanel):
        """Exactly the selected selector carries the selected class."""
        for i, selector in enumerate(panel.tab_bar.children()):
            selected = i == panel.selected
            self.assertEqual(selector.style.has_class(TabPanel.SELECTED), selected)
            self.assertEqual(selector.style.has_class(TabPanel.NOT_SELECTED), not selected)


class TestAddAndSelect(TabPanelTestCase):

    def test_empty_panel(self):
        panel = TabPanel()
        self.assertEqual(panel.selected, -1)
        self.assertEqual(panel.children_count(), 0)
        self.assertTrue(panel.style.has_class("rcu-TabPanel"))
        self.assertTrue(panel.tab_bar.style.has_class("rcu-TabBar"))

    def test_first_add_selects_it(self):
        panel = self.make_panel(1)
        self.assertEqual(panel.selected, 0)
        self.assertSelectorStyles(panel)

    def test_later_adds_keep_selection(self):
        panel = self.make_panel(3)
        self.assertEqual(panel.selected, 0)
        self.assertAligned(panel)
        self.assertSelectorStyles(panel)
        self.assertIs(panel.tab_bar.child_at(2), self.selectors[2])
        self.assertIs(panel.child_at(2), self.contents[2])
        self.assertTrue(panel.cell_fmt(self.contents[1]).style.has_class("rcu-TabPanel-Content"))

    def test_add_string(self):
        panel = TabPanel()
        content = Label("x")
        panel.add_string("First", content)
        self.assertEqual(panel.tab_bar.child_at(0).text, "First")
        self.assertEqual(panel.selected, 0)

    def test_add_refuses_owned_components(self):
        panel = self.make_panel(1)
        other = Panel()
        owned = Label("owned")
        other.add(owned)
        self.assertFalse(panel.add(Label("sel"), owned))
        self.assertFalse(panel.add(owned, Label("content")))
        self.assertEqual(panel.children_count(), 1)
        self.assertAligned(panel)

    def test_add_refuses_same_component_twice(self):
        panel = self.make_panel(1)
        both = Label("both")
        self.assertFalse(panel.add(both, both))
        self.assertIsNone(both.parent)
        self.assertEqual(both.handlers_count(EventType.CLICK), 0)
        self.assertEqual(panel.children_count(), 1)
        self.assertAligned(panel)

    def test_add_refuses_panel_and_ancestors(self):
        outer = Panel()
        panel = self.make_panel(1)
        outer.add(panel)
        self.assertFalse(panel.add(Label("sel"), panel))
        self.assertFalse(panel.add(panel, Label("content")))
        self.assertFalse(panel.add(Label("sel"), outer))
        self.assertFalse(panel.add(outer, Label("content")))
        self.assertFalse(panel.add(panel.tab_bar, Label("content")))
        self.assertEqual(panel.children_count(), 1)
        self.assertAligned(panel)
        self.assertIsNone(outer.parent)

    def test_insert_is_refused(self):
        panel = self.make_panel(1)
        self.assertFalse(panel.insert(Label("x"), 0))
        self.assertAligned(panel)

    def test_set_selected(self):
        panel = self.make_panel(3)
        panel.set_selected(2)
        self.assertEqual(panel.selected, 2)
        self.assertSelectorStyles(panel)

    def test_set_selected_past_the_end_is_ignored(self):
        panel = self.make_panel(3)
        panel.set_selected(1)
        panel.set_selected(3)
        self.assertEqual(panel.selected, 1)
        self.assertSelectorStyles(panel)

    def test_negative_index_deselects(self):
        panel = self.make_panel(3)
        panel.set_selected(-5)
        self.assertEqual(panel.selected, -1)
        self.assertSelectorStyles(panel)

    def test_selector_click_selects_and_marks_panel_dirty(self):
        panel = self.make_panel(3)
        selector = self.selectors[2]
        event = Event(EventType.CLICK, selector, Interaction.create(selector.id, EventType.CLICK))
        selector.dispatch_event(event)
        self.assertEqual(panel.selected, 2)
        self.assertIn(panel, event.dirty)
        self.assertSelectorStyles(panel)

    def test_selector_click_follows_index_shift(self):
        panel = self.make_panel(3)
        panel.remove(self.contents[0])
        selector = self.selectors[2]
        selector.dispatch_event(Event(EventType.CLICK, selector))
        self.assertEqual(panel.selected, 1)


class TestRemove(TabPanelTestCase):

    def test_remove_before_selection_keeps_the_same_tab(self):
        panel = self.make_panel(3)
        panel.set_selected(2)
        self.assertTrue(panel.remove(self.contents[0]))
        self.assertEqual(panel.selected, 1)
        self.assertIs(panel.child_at(panel.selected), self.contents[2])
        self.assertAligned(panel)
        self.assertSelectorStyles(panel)

    def test_remove_after_selection(self):
        panel = self.make_panel(3)
        self.assertTrue(panel.remove(self.contents[1]))
        self.assertEqual(panel.selected, 0)
        self.assertEqual(panel.children_count(), 2)
        self.assertAligned(panel)

    def test_remove_selected_middle_selects_next(self):
        panel = self.make_panel(3)
        panel.set_selected(1)
        panel.remove(self.contents[1])
        self.assertEqual(panel.selected, 1)
        self.assertIs(panel.child_at(1), self.contents[2])
        self.assertSelectorStyles(panel)

    def test_remove_selected_last_selects_new_last(self):
        panel = self.make_panel(3)
        panel.set_selected(2)
        panel.remove(self.contents[2])
        self.assertEqual(panel.selected, 1)
        self.assertSelectorStyles(panel)

    def test_remove_only_tab(self):
        panel = self.make_panel(1)
        panel.remove(self.contents[0])
        self.assertEqual(panel.selected, -1)
        self.assertEqual(panel.children_count(), 0)
        self.assertAligned(panel)

    def test_remove_by_selector(self):
        panel = self.make_panel(3)
        self.assertTrue(panel.remove(self.selectors[1]))
        self.assertEqual(panel.index_of(self.contents[1]), -1)
        self.assertEqual(panel.tab_bar.index_of(self.selectors[1]), -1)
        self.assertAligned(panel)

    def test_remove_through_tab_bar_removes_the_pair(self):
        panel = self.make_panel(2)
        self.assertTrue(panel.tab_bar.remove(self.selectors[0]))
        self.assertEqual(panel.children_count(), 1)
        self.assertIs(panel.child_at(0), self.contents[1])
        self.assertEqual(panel.selected, 0)
        self.assertAligned(panel)
        self.assertSelectorStyles(panel)

    def test_remove_unknown_component(self):
        panel = self.make_panel(2)
        self.assertFalse(panel.remove(Label("stranger")))
        self.assertFalse(panel.tab_bar.remove(Label("stranger")))
        self.assertEqual(panel.children_count(), 2)

    def test_removed_components_are_released(self):
        panel = self.make_panel(2)
        panel.remove(self.contents[0])
        self.assertIsNone(self.contents[0].parent)
        self.assertIsNone(self.selectors[0].parent)
        self.assertEqual(self.selectors[0].handlers_count(EventType.CLICK), 0)
        # The removed content keeps its own state.
        self.assertEqual(self.contents[0].text, "content0")

    def test_clear(self):
        panel = self.make_panel(3)
        panel.clear()
        self.assertEqual(panel.selected, -1)
        self.assertEqual(panel.children_count(), 0)
        self.assertAligned(panel)
        self.assertEqual(self.selectors[0].handlers_count(EventType.CLICK), 0)

    def test_alignment_holds_through_a_sequence(self):
        panel = self.make_panel(4)
        panel.set_selected(3)
        for component in (self.contents[1], self.selectors[3], self.contents[0]):
            panel.remove(component)
            self.assertAligned(panel)
            self.assertSelectorStyles(panel)
        self.assertEqual(panel.selected, 0)
        self.assertIs(panel.child_at(0), self.contents[2])
        panel.add(Label("new"), Label("new content"))
        self.assertAligned(panel)

    def test_three_tabs_remove_middle_scenario(self):
        panel = self.make_panel(3)
        panel.remove(panel.child_at(1))
        self.assertEqual(panel.selected, 0)
        self.assertEqual(panel.children_count(), 2)
        self.assertEqual(panel.tab_bar.children_count(), 2)


class TestFindAndRender(TabPanelTestCase):

    def test_find_by_id_searches_content_and_tab_bar(self):
        panel = self.make_panel(2)
        self.assertIs(panel.find_by_id(panel.id), panel)
        self.assertIs(panel.find_by_id(self.contents[1].id), self.contents[1])
        self.assertIs(panel.find_by_id(self.selectors[1].id), self.selectors[1])
        self.assertIs(panel.find_by_id(panel.tab_bar.id), panel.tab_bar)
        self.assertIsNone(panel.find_by_id(-1))

    def test_only_selected_content_is_rendered(self):
        panel = self.make_panel(3)
        panel.set_selected(1)
        html = render(panel)
        self.assertIn("content1", html)
        self.assertNotIn("content0", html)
        self.assertNotIn("content2", html)
        for i in range(3):
            self.assertIn(f">tab{i}</span>", html)

    def test_render_without_selection(self):
        panel = TabPanel()
        html = render(panel)
        self.assertIn("<td></td>", html)

    def test_placement_order(self):
        panel = self.make_panel(2)
        html = render(panel)
        self.assertLess(html.index("tab0"), html.index("content0"))

        panel.set_placement(TabBarPlacement.BOTTOM)
        html = render(panel)
        self.assertLess(html.index("content0"), html.index("tab0"))
        self.assertEqual(html.count("<tr"), 2 + 1)  # two panel rows plus the horizontal tab bar row

        panel.set_placement(TabBarPlacement.LEFT)
        html = render(panel)
        self.assertLess(html.index("tab0"), html.index("content0"))

        panel.set_placement(TabBarPlacement.RIGHT)
        html = render(panel)
        self.assertLess(html.index("content0"), html.index("tab0"))

    def test_placement_sets_tab_bar_layout_and_class(self):
        panel = TabPanel()
        self.assertTrue(panel.tab_bar.style.has_class("rcu-TabBar-Top"))
        self.assertIs(panel.tab_bar.layout, Layout.HORIZONTAL)

        panel.set_placement(TabBarPlacement.LEFT)
        self.assertIs(panel.placement, TabBarPlacement.LEFT)
        self.assertFalse(panel.tab_bar.style.has_class("rcu-TabBar-Top"))
        self.assertTrue(panel.tab_bar.style.has_class("rcu-TabBar-Left"))
        self.assertIs(panel.tab_bar.layout, Layout.VERTICAL)

    def test_selector_renders_click_handler(self):
        panel = self.make_panel(1)
        html = render(panel)
        self.assertIn(f'onclick="se(event,0,{self.selectors[0].id})"', html)


if __name__ == "__main__":
    unittest.main()
