import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

import flet as ft

from celestius.state.app_state import AppState
from celestius.ui.views.calculator_view import build_calculator_view


def _walk(control):
    yield control
    children = list(getattr(control, "controls", None) or [])
    content = getattr(control, "content", None)
    if isinstance(content, ft.Control):
        children.append(content)
    for child in children:
        yield from _walk(child)


def _find(view, tag):
    return [c for c in _walk(view) if getattr(c, "data", None) == tag]


def _event(value):
    return SimpleNamespace(control=SimpleNamespace(value=value))


class CalculatorViewTests(unittest.TestCase):
    def setUp(self):
        self.page = MagicMock()
        self.app_state = AppState()
        self.view = build_calculator_view(self.page, self.app_state)

    def test_initial_render(self):
        self.assertEqual(len(_find(self.view, "name")), 1)
        self.assertTrue(_find(self.view, "delete")[0].disabled)
        self.assertFalse(_find(self.view, "results")[0].visible)
        grade = _find(self.view, "grade")[0]
        self.assertEqual([o.key for o in grade.options], ["O", "A+", "A", "B+", "B", "C", "RE"])

    def test_add_and_remove_rows(self):
        _find(self.view, "add")[0].on_click(None)
        deletes = _find(self.view, "delete")
        self.assertEqual(len(deletes), 2)
        self.assertFalse(any(d.disabled for d in deletes))

        deletes[0].on_click(None)
        self.assertEqual(len(self.app_state.form.subjects), 1)
        self.assertTrue(_find(self.view, "delete")[0].disabled)
        self.page.update.assert_called()

    def test_calculate_shows_results(self):
        _find(self.view, "add")[0].on_click(None)
        credits = _find(self.view, "credits")
        grades = _find(self.view, "grade")
        credits[0].on_change(_event("4"))
        grades[0].on_change(_event("O"))
        credits[1].on_change(_event("3"))
        grades[1].on_change(_event("A"))
        _find(self.view, "previous")[0].on_change(_event("8.5"))

        _find(self.view, "calculate")[0].on_click(None)

        results = _find(self.view, "results")[0]
        self.assertTrue(results.visible)
        self.assertEqual([t.value for t in results.controls], ["SGPA: 9.14", "CGPA: 8.82"])

    def test_number_fields_show_stored_value_on_blur(self):
        credits = _find(self.view, "credits")[0]
        for typed, shown in (("-3", ""), ("abc", ""), ("4.50", "4.5"), ("3", "3")):
            credits.value = typed
            credits.on_change(_event(typed))
            credits.on_blur(SimpleNamespace(control=credits))
            self.assertEqual(credits.value, shown)

        previous = _find(self.view, "previous")[0]
        previous.value = "eight"
        previous.on_change(_event("eight"))
        previous.on_blur(SimpleNamespace(control=previous))
        self.assertEqual(previous.value, "")
        self.assertEqual(self.app_state.form.previous_average, 0.0)

    def test_zero_result_is_still_shown(self):
        _find(self.view, "calculate")[0].on_click(None)
        results = _find(self.view, "results")[0]
        self.assertTrue(results.visible)
        self.assertEqual([t.value for t in results.controls], ["SGPA: 0", "CGPA: 0"])


if __name__ == "__main__":
    unittest.main()
