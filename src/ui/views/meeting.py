import logging

import flet as ft

from src.components.meeting_cost import MeetingCostOutput, format_currency
from src.domain.coerce import format_number
from src.ui.components.section_card import SectionCard
from src.ui.state import AppState

logger = logging.getLogger(__name__)

COLUMNS = ("Name", "Salary", "Meeting Cost", "Actions")


def build_rows(summary: MeetingCostOutput, symbol: str) -> list[list[str]]:
    """Display strings for each participant row followed by the totals row."""
    rows = [
        [line.name, format_currency(line.salary, symbol), format_currency(line.cost, symbol)]
        for line in summary.lines
    ]
    rows.append(
        [
            "Total",
            format_currency(summary.total_salary, symbol),
            format_currency(summary.total_cost, symbol),
        ]
    )
    return rows


class MeetingView(ft.Column):  # type: ignore
    def __init__(self, state: AppState) -> None:
        super().__init__(spacing=24, scroll=ft.ScrollMode.AUTO, width=900)
        self.app_state = state
        self.symbol = state.rules.display.currency_symbol

        self.duration_field = ft.TextField(
            label="Meeting Duration (minutes)",
            value=format_number(state.duration_minutes),
            width=300,
            on_change=self.duration_change,
        )
        self.table = ft.DataTable(
            columns=[ft.DataColumn(ft.Text(c)) for c in COLUMNS],
            rows=[],
        )

        self.name_field = ft.TextField(
            label="Participant Name",
            expand=True,
            on_change=self.name_change,
        )
        self.salary_field = ft.TextField(
            label="Salary (per year)",
            expand=True,
            on_change=self.salary_change,
        )
        self.error_list = ft.Column(spacing=4)

        self.controls = [
            SectionCard(
                ft.Column(
                    [
                        self.duration_field,
                        ft.Divider(),
                        ft.Text("Meeting Participants", size=16, weight=ft.FontWeight.W_600),
                        ft.Row([self.table], scroll=ft.ScrollMode.AUTO),
                    ]
                )
            ),
            SectionCard(
                ft.Column(
                    [
                        ft.Row([self.name_field, self.salary_field]),
                        self.error_list,
                        ft.FilledButton(
                            "Add Participant",
                            icon=ft.Icons.PERSON_ADD,
                            on_click=self.add_click,
                        ),
                    ]
                ),
                title="Add Meeting Participant",
            ),
        ]
        self.refresh()

    # --- Rendering ---

    def refresh(self) -> None:
        """Rebuild table, form fields and errors from state."""
        summary = self.app_state.summary()
        rows = build_rows(summary, self.symbol)

        table_rows: list[ft.DataRow] = []
        for line, cells in zip(summary.lines, rows, strict=False):
            table_rows.append(
                ft.DataRow(
                    cells=[
                        *[ft.DataCell(ft.Text(c)) for c in cells],
                        ft.DataCell(
                            ft.FilledButton(
                                "Remove",
                                data=line.index,
                                style=ft.ButtonStyle(bgcolor="error", color="onError"),
                                on_click=self.remove_click,
                            )
                        ),
                    ]
                )
            )

        total = rows[-1]
        table_rows.append(
            ft.DataRow(
                cells=[
                    *[ft.DataCell(ft.Text(c, weight=ft.FontWeight.BOLD)) for c in total],
                    ft.DataCell(ft.Text("")),
                ]
            )
        )
        self.table.rows = table_rows

        self.name_field.value = self.app_state.pending_name
        self.salary_field.value = format_number(self.app_state.pending_salary)
        self.error_list.controls = [
            ft.Text(msg, color="error", size=13) for msg in self.app_state.form_errors
        ]

    def _render(self) -> None:
        self.refresh()
        if self.page:
            self.update()

    # --- Handlers ---

    def duration_change(self, e: ft.ControlEvent) -> None:
        self.app_state.set_duration(e.control.value)
        logger.debug(f"Duration set to {self.app_state.duration_minutes} minutes")
        self._render()

    def name_change(self, e: ft.ControlEvent) -> None:
        self.app_state.set_pending_name(e.control.value)

    def salary_change(self, e: ft.ControlEvent) -> None:
        self.app_state.set_pending_salary(e.control.value)

    def add_click(self, _: ft.ControlEvent) -> None:
        self.app_state.add_participant()
        self._render()

    def remove_click(self, e: ft.ControlEvent) -> None:
        self.app_state.remove_participant(int(e.control.data))
        self._render()
