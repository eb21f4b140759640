# tests/test_reconciler.py
import unittest

from reconui import DirtySet, Label, Panel, Patch, Reconciler, ReconciliationResult, TabPanel
from reconui.reconciler import is_rendered


class TestDirtySet(unittest.TestCase):

    def setUp(self):
        self.root = Panel()
        self.inner = Panel()
        self.leaf = Label("leaf")
        self.other = Label("other")
        self.inner.add(self.leaf)
        self.root.add(self.inner)
        self.root.add(self.other)

    def test_marking_is_idempotent(self):
        dirty = DirtySet()
        dirty.add(self.leaf)
        dirty.add(self.leaf, self.leaf)
        self.assertEqual(len(dirty), 1)
        self.assertIn(self.leaf, dirty)
        self.assertNotIn(self.other, dirty)

    def test_none_is_ignored(self):
        dirty = DirtySet()
        dirty.add(None)
        self.assertEqual(len(dirty), 0)

    def test_roots_drop_covered_descendants(self):
        dirty = DirtySet()
        dirty.add(self.leaf, self.other, self.inner)
        self.assertEqual(dirty.roots(), [self.other, self.inner])

    def test_root_covers_everything(self):
        dirty = DirtySet()
        dirty.add(self.leaf, self.root, self.other)
        self.assertEqual(dirty.roots(), [self.root])

    def test_unrelated_components_are_all_roots(self):
        dirty = DirtySet()
        dirty.add(self.leaf, self.other)
        self.assertEqual(dirty.roots(), [self.leaf, self.other])

    def test_tab_bar_selectors_are_covered_by_their_panel(self):
        tabs = TabPanel()
        selector = Label("tab")
        tabs.add(selector, Label("content"))
        dirty = DirtySet()
        dirty.add(selector, tabs)
        self.assertEqual(dirty.roots(), [tabs])

    def test_iter_and_clear(self):
        dirty = DirtySet()
        dirty.add(self.leaf, self.other)
        self.assertEqual(list(dirty), [self.leaf, self.other])
        dirty.clear()
        self.assertEqual(len(dirty), 0)


class TestReconciler(unittest.TestCase):

    def test_render(self):
        label = Label("hi")
        self.assertEqual(Reconciler().render(label), f'<span id="{label.id}" class="rcu-Label">hi</span>')

    def test_reconcile_renders_each_root_once(self):
        root = Panel()
        a, b = Label("a"), Label("b")
        root.add(a)
        root.add(b)
        dirty = DirtySet()
        dirty.add(b, a)
        result = Reconciler().reconcile(dirty)
        self.assertEqual(result.html_ids, [str(b.id), str(a.id)])
        self.assertEqual(result.patches[0], Patch("REPLACE", str(b.id), {"html": Reconciler().render(b)}))
        self.assertTrue(result)

    def test_components_outside_the_rendered_tree_are_skipped(self):
        root = Panel()
        tabs = TabPanel()
        root.add(tabs)
        shown, hidden = Label("shown"), Label("hidden")
        tabs.add_string("one", shown)
        tabs.add_string("two", hidden)
        detached = Label("detached")
        dirty = DirtySet()
        dirty.add(shown, hidden, detached, tabs.tab_bar.child_at(1))
        result = Reconciler().reconcile(dirty, root)
        self.assertEqual(result.html_ids, [str(shown.id), str(tabs.tab_bar.child_at(1).id)])

    def test_without_root_every_dirty_root_is_rendered(self):
        detached = Label("detached")
        dirty = DirtySet()
        dirty.add(detached)
        self.assertEqual(Reconciler().reconcile(dirty).html_ids, [str(detached.id)])

    def test_is_rendered(self):
        root = Panel()
        tabs = TabPanel()
        root.add(tabs)
        content = Label("c")
        tabs.add_string("t", content)
        self.assertTrue(is_rendered(root, root))
        self.assertTrue(is_rendered(content, root))
        self.assertTrue(is_rendered(tabs.tab_bar, root))
        tabs.set_selected(-1)
        self.assertFalse(is_rendered(content, root))
        self.assertFalse(is_rendered(content, Panel()))

    def test_empty_dirty_set_gives_empty_result(self):
        result = Reconciler().reconcile(DirtySet())
        self.assertEqual(result.patches, [])
        self.assertFalse(result)
        self.assertFalse(ReconciliationResult())


if __name__ == "__main__":
    unittest.main()
