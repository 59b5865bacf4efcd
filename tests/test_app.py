import os
import sys
import tempfile
import unittest

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from textual.widgets import DataTable, Input  # noqa: E402

from main import ProductManagerApp  # noqa: E402
from store.export import read_csv  # noqa: E402
from store.models import ProductRecord  # noqa: E402
from views.modal_project_name import ProjectNameModal  # noqa: E402
from views.scr_products import ACTION_COLUMN, ProductsScreen  # noqa: E402

SIZE = (120, 40)


class AppFlowTestCase(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.app = ProductManagerApp(export_dir=self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    async def wait_until(self, pilot, predicate, attempts=50):
        for _ in range(attempts):
            if predicate():
                return
            await pilot.pause()
        self.fail("condition not reached")

    async def start_project(self, pilot, name="obra"):
        await self.wait_until(pilot, lambda: isinstance(self.app.screen, ProjectNameModal))
        await pilot.press(*name, "enter")
        await self.wait_until(pilot, lambda: isinstance(self.app.screen, ProductsScreen))

    async def add_products(self, pilot, *products):
        expected = len(self.app.state.registry) + len(products)
        for code, description, quantity in products:
            await pilot.press(*code, "enter", *description, "enter", *quantity, "enter")
        await self.wait_until(pilot, lambda: len(self.app.state.registry) == expected)
        await pilot.pause()

    async def test_blank_project_name_keeps_dialog_open(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.wait_until(
                pilot, lambda: isinstance(self.app.screen, ProjectNameModal)
            )
            await pilot.press("space", "space", "enter")
            await pilot.pause()

            self.assertIsInstance(self.app.screen, ProjectNameModal)
            self.assertIsNone(self.app.state.project)
            name_input = self.app.screen.query_one("#input-project-name", Input)
            self.assertTrue(name_input.has_class("-invalid"))

    async def test_project_name_opens_product_screen(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)

            self.assertEqual(self.app.state.project.name, "obra")
            self.assertEqual(self.app.screen.sub_title, "obra")
            self.assertEqual(self.app.focused.id, "input-code")
            # nothing to list or export yet
            self.assertTrue(
                self.app.screen.query_one("#hort-list-header").has_class("hidden")
            )

    async def test_enter_walks_the_form_and_submits(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)

            await pilot.press("a", "b", "c")
            await pilot.pause()
            self.assertEqual(self.app.screen.query_one("#input-code", Input).value, "ABC")
            await pilot.press("enter")
            await pilot.pause()
            self.assertEqual(self.app.focused.id, "input-description")
            await pilot.press(*"widget", "enter")
            await pilot.pause()
            self.assertEqual(self.app.focused.id, "input-quantity")
            await pilot.press("5", "enter")

            await self.wait_until(pilot, lambda: len(self.app.state.registry) == 1)
            await pilot.pause()
            self.assertEqual(
                self.app.state.registry.list(), [ProductRecord("ABC", "widget", 5)]
            )
            self.assertEqual(self.app.focused.id, "input-code")
            self.assertEqual(self.app.screen.query_one("#input-code", Input).value, "")
            self.assertEqual(self.app.screen.query_one(DataTable).row_count, 1)
            self.assertFalse(
                self.app.screen.query_one("#hort-list-header").has_class("hidden")
            )

    async def test_empty_code_is_not_added(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)

            self.app.screen.query_one("#input-description").focus()
            await pilot.press(*"widget", "enter", "enter")
            await pilot.pause()

            self.assertEqual(len(self.app.state.registry), 0)
            code_input = self.app.screen.query_one("#input-code", Input)
            self.assertTrue(code_input.has_class("-invalid"))

    async def test_remove_and_export(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)

            for code, description, quantity in (
                ("abc", "widget", "5"),
                ("xyz", "gadget", "0"),
                ("abc", "other", "2"),
            ):
                await pilot.press(*code, "enter", *description, "enter", *quantity, "enter")
            await self.wait_until(pilot, lambda: len(self.app.state.registry) == 3)

            screen = self.app.screen
            screen.remove_product("ABC")
            await pilot.pause()
            self.assertEqual(
                self.app.state.registry.list(), [ProductRecord("XYZ", "gadget", 0)]
            )
            self.assertEqual(screen.query_one(DataTable).row_count, 1)

            screen.handle_export()
            await pilot.pause()

            exported = os.listdir(self.temp_dir.name)
            self.assertEqual(len(exported), 1)
            self.assertTrue(exported[0].startswith("obra_"))
            with open(os.path.join(self.temp_dir.name, exported[0]), "rb") as f:
                self.assertEqual(read_csv(f.read()), self.app.state.registry.list())


    async def test_remover_cell_removes_every_record_with_that_code(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)
            await self.add_products(
                pilot,
                ("abc", "widget", "5"),
                ("xyz", "gadget", "0"),
                ("abc", "other", "2"),
                ("kkk", "bolt", "1"),
            )

            table = self.app.screen.query_one(DataTable)
            table.focus()
            table.move_cursor(row=0, column=ACTION_COLUMN)
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()

            self.assertEqual(
                [r.code for r in self.app.state.registry], ["XYZ", "KKK"]
            )
            self.assertEqual(table.row_count, 2)

    async def test_selecting_other_cells_removes_nothing(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)
            await self.add_products(pilot, ("abc", "widget", "5"))

            table = self.app.screen.query_one(DataTable)
            table.focus()
            table.move_cursor(row=0, column=0)
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()

            self.assertEqual(len(self.app.state.registry), 1)

    async def test_delete_key_removes_highlighted_code(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)
            await self.add_products(
                pilot,
                ("xyz", "gadget", "0"),
                ("kkk", "bolt", "1"),
                ("xyz", "again", "3"),
            )

            screen = self.app.screen
            table = screen.query_one(DataTable)
            table.focus()
            table.move_cursor(row=0, column=0)
            await pilot.pause()
            await pilot.press("delete")
            await pilot.pause()

            self.assertEqual([r.code for r in self.app.state.registry], ["KKK"])
            self.assertEqual(table.row_count, 1)
            self.assertFalse(screen.query_one("#hort-list-header").has_class("hidden"))

            # removing the last row hides the list and the export button again
            table.move_cursor(row=0, column=0)
            await pilot.pause()
            await pilot.press("delete")
            await pilot.pause()

            self.assertTrue(self.app.state.registry.is_empty())
            self.assertEqual(table.row_count, 0)
            self.assertTrue(screen.query_one("#hort-list-header").has_class("hidden"))
            self.assertTrue(screen.query_one("#table-products").has_class("hidden"))

    async def test_failed_export_keeps_registry_and_screen(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)
            await self.add_products(pilot, ("abc", "widget", "5"))

            # a regular file where the export directory should be
            blocker = os.path.join(self.temp_dir.name, "not-a-dir")
            with open(blocker, "w") as f:
                f.write("x")
            self.app.export_dir = blocker

            screen = self.app.screen
            screen.handle_export()
            await pilot.pause()

            self.assertIs(self.app.screen, screen)
            self.assertIsInstance(self.app.screen, ProductsScreen)
            self.assertEqual(
                self.app.state.registry.list(), [ProductRecord("ABC", "widget", 5)]
            )
            self.assertEqual(os.listdir(self.temp_dir.name), ["not-a-dir"])
            with open(blocker) as f:
                self.assertEqual(f.read(), "x")

    async def test_negative_quantity_stays_marked_invalid(self):
        async with self.app.run_test(size=SIZE) as pilot:
            await self.start_project(pilot)

            screen = self.app.screen
            screen.query_one("#input-code", Input).value = "ABC"
            screen.query_one("#input-description", Input).value = "widget"
            quantity_input = screen.query_one("#input-quantity", Input)
            quantity_input.value = "-3"
            await pilot.pause()

            self.assertEqual(self.app.state.draft.quantity, -3)
            self.assertTrue(quantity_input.has_class("-invalid"))

            screen.handle_add()
            await pilot.pause()

            self.assertEqual(len(self.app.state.registry), 0)
            self.assertTrue(quantity_input.has_class("-invalid"))


if __name__ == "__main__":
    unittest.main()
