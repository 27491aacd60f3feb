from typing import Callable
import flet as ft

from celestius.config.settings import settings
from celestius.core.gpa import SubjectEntry, format_average
from celestius.core.grades import GRADE_CODES
from celestius.state.app_state import AppState
from celestius.state.form_state import (
    add_subject,
    calculate,
    remove_subject,
    set_previous_average,
    update_subject,
)


def _field_text(value: float) -> str:
    # 0 renders as an empty field so the hint text shows.
    if not value:
        return ""
    text = str(float(value))
    return text[:-2] if text.endswith(".0") else text


def build_calculator_view(page: ft.Page, app_state: AppState) -> ft.View:
    rows_column = ft.Column(spacing=10)
    sgpa_text = ft.Text(size=18, weight=ft.FontWeight.BOLD)
    cgpa_text = ft.Text(size=18, weight=ft.FontWeight.BOLD)
    results = ft.Column(
        visible=False,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        controls=[sgpa_text, cgpa_text],
        data="results",
    )

    def make_field_handler(index: int, field_name: str) -> Callable:
        def handler(e):
            app_state.apply(update_subject, index, field_name, e.control.value)

        return handler

    def make_blur_handler(index: int) -> Callable:
        def handler(e):
            subjects = app_state.form.subjects
            if index >= len(subjects):
                return
            e.control.value = _field_text(subjects[index].credits)
            page.update()

        return handler

    def make_delete_handler(index: int) -> Callable:
        def handler(_):
            app_state.apply(remove_subject, index)
            render_subjects()
            page.update()

        return handler

    def build_row(index: int, subject: SubjectEntry, can_remove: bool) -> ft.Row:
        return ft.Row(
            controls=[
                ft.TextField(
                    hint_text="Subject Name",
                    value=subject.name,
                    expand=True,
                    on_change=make_field_handler(index, "name"),
                    data="name",
                ),
                ft.TextField(
                    hint_text="Credits",
                    value=_field_text(subject.credits),
                    width=100,
                    keyboard_type=ft.KeyboardType.NUMBER,
                    on_change=make_field_handler(index, "credits"),
                    on_blur=make_blur_handler(index),
                    data="credits",
                ),
                ft.Dropdown(
                    hint_text="Grade",
                    width=120,
                    value=subject.grade or None,
                    options=[ft.dropdown.Option(code) for code in GRADE_CODES],
                    on_change=make_field_handler(index, "grade"),
                    data="grade",
                ),
                ft.IconButton(
                    icon=ft.Icons.DELETE,
                    icon_color=ft.Colors.RED_400,
                    disabled=not can_remove,
                    on_click=make_delete_handler(index),
                    data="delete",
                ),
            ]
        )

    def render_subjects() -> None:
        form = app_state.form
        rows_column.controls = [
            build_row(index, subject, form.can_remove) for index, subject in enumerate(form.subjects)
        ]

    def render_results() -> None:
        form = app_state.form
        if not form.has_result:
            results.visible = False
            return
        result = form.result
        sgpa_text.value = f"SGPA: {format_average(result.sgpa)}"
        cgpa_text.value = f"CGPA: {format_average(result.cgpa)}"
        results.visible = True

    def on_add(_):
        app_state.apply(add_subject)
        render_subjects()
        page.update()

    def on_previous_change(e):
        app_state.apply(set_previous_average, e.control.value)

    def on_previous_blur(e):
        e.control.value = _field_text(app_state.form.previous_average)
        page.update()

    def on_calculate(_):
        app_state.apply(calculate)
        render_results()
        page.update()

    previous = ft.TextField(
        label="Previous CGPA",
        hint_text="Enter previous CGPA",
        value=_field_text(app_state.form.previous_average),
        keyboard_type=ft.KeyboardType.NUMBER,
        on_change=on_previous_change,
        on_blur=on_previous_blur,
        data="previous",
    )

    render_subjects()
    render_results()

    return ft.View(
        route="/",
        controls=[
            ft.Container(
                padding=20,
                width=680,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Row(
                            alignment=ft.MainAxisAlignment.CENTER,
                            controls=[
                                ft.TextButton(
                                    settings.brand_name,
                                    url=settings.brand_url,
                                    url_target=ft.UrlTarget.BLANK,
                                    data="brand",
                                ),
                            ],
                        ),
                        rows_column,
                        ft.Button("Add Subject", icon=ft.Icons.ADD, on_click=on_add, data="add"),
                        ft.Divider(),
                        previous,
                        ft.Button("Calculate GPA", on_click=on_calculate, data="calculate"),
                        results,
                    ],
                ),
            ),
        ],
    )
