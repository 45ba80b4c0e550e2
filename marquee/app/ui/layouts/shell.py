from __future__ import annotations

from typing import List

import flet as ft

from marquee.app.state import Store
from marquee.app.ui.renderer import (
    Link,
    catalog_links,
    detail_fields,
    detail_sections,
    view_title,
)
from marquee.app.ui.theme import (
    AMBER_PRIMARY, SLATE_PRIMARY,
    TEXT_TITLE, TEXT_SECTION_HEADER, TEXT_LABEL, TEXT_VALUE, TEXT_PLACEHOLDER,
    CRUMB_ACTIVE, CRUMB_INACTIVE,
    BG_BAR, BG_GRADIENT_START, BG_GRADIENT_END, BG_CARD, BORDER_DIVIDER,
    get_log_color,
)


def apply_shell_theme(page: ft.Page) -> None:
    page.theme = ft.Theme(
        color_scheme_seed=AMBER_PRIMARY,
        visual_density=ft.VisualDensity.COMFORTABLE,
        use_material3=True,
    )
    page.theme_mode = ft.ThemeMode.DARK
    page.padding = 0


def build_shell(page: ft.Page, store: Store) -> ft.View:
    """Build the single shell view.

    The view never changes; its content is re-rendered whenever the
    catalog, the loading flag or the navigation path changes.
    """
    apply_shell_theme(page)

    def _push(link: Link):
        def handler(e=None):
            store.path.push(link.route)
        return handler

    def _truncate(index: int):
        def handler(e=None):
            store.path.reduce_array(index)
        return handler

    def _link_tiles(links: List[Link]) -> List[ft.Control]:
        return [
            ft.ListTile(
                title=ft.Text(link.title, color=TEXT_VALUE),
                subtitle=ft.Text(link.subtitle, color=TEXT_LABEL, size=12) if link.subtitle else None,
                trailing=ft.Icon(ft.Icons.CHEVRON_RIGHT, color=SLATE_PRIMARY),
                on_click=_push(link),
            )
            for link in links
        ]

    # --- Breadcrumb bar ---
    back_button = ft.IconButton(
        ft.Icons.ARROW_BACK,
        icon_color=SLATE_PRIMARY,
        tooltip="Back",
        on_click=lambda e: store.path.pop(),
    )
    crumbs_row = ft.Row(spacing=0, wrap=True, expand=True)
    status_text = ft.Text(store.app.status_text.value, color=TEXT_LABEL, size=12)

    def _sync_crumbs() -> None:
        labels = store.path.labels()
        crumbs: List[ft.Control] = [
            ft.TextButton(
                "Movies",
                on_click=lambda e: store.path.clear(),
                style=ft.ButtonStyle(color=CRUMB_ACTIVE if not labels else CRUMB_INACTIVE),
            )
        ]
        for index, label in enumerate(labels):
            crumbs.append(ft.Text("/", color=TEXT_PLACEHOLDER))
            is_last = index == len(labels) - 1
            crumbs.append(
                ft.TextButton(
                    label,
                    on_click=_truncate(index),
                    style=ft.ButtonStyle(color=CRUMB_ACTIVE if is_last else CRUMB_INACTIVE),
                )
            )
        crumbs_row.controls = crumbs
        back_button.disabled = store.path.is_at_root

    # --- Content ---
    content_container = ft.Container(expand=True, padding=ft.padding.only(left=20, right=20, top=16, bottom=20))

    def _loading_view() -> ft.Control:
        return ft.Column(
            [
                ft.ProgressRing(width=32, height=32, stroke_width=3, color=AMBER_PRIMARY),
                ft.Text("Loading movies...", color=TEXT_LABEL),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            alignment=ft.MainAxisAlignment.CENTER,
            expand=True,
        )

    def _list_view() -> ft.Control:
        tiles = _link_tiles(catalog_links(store.data))
        if not tiles:
            tiles = [ft.Text("No movies", color=TEXT_PLACEHOLDER, italic=True)]
        return ft.Column(
            [
                ft.Text("Movies", size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                ft.Divider(color=BORDER_DIVIDER, height=1),
                ft.ListView(controls=tiles, expand=True, spacing=2),
            ],
            expand=True,
            spacing=12,
        )

    def _detail_view() -> ft.Control:
        route = store.path.current
        controls: List[ft.Control] = [
            ft.Text(view_title(route), size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
            ft.Divider(color=BORDER_DIVIDER, height=1),
        ]
        for label, value in detail_fields(route):
            controls.append(
                ft.Row([
                    ft.Text(label, color=TEXT_LABEL, width=110),
                    ft.Text(value, color=TEXT_VALUE, expand=True),
                ], vertical_alignment=ft.CrossAxisAlignment.START)
            )
        for section in detail_sections(route, store.data):
            controls.append(ft.Text(section.heading, size=16, weight=ft.FontWeight.W_600, color=TEXT_SECTION_HEADER))
            tiles = _link_tiles(section.links) or [ft.Text("None", color=TEXT_PLACEHOLDER, italic=True)]
            controls.append(ft.Container(bgcolor=BG_CARD, border_radius=8, content=ft.Column(tiles, spacing=0)))
        return ft.Column(controls, spacing=12, scroll=ft.ScrollMode.AUTO, expand=True)

    def _render(e=None) -> None:
        _sync_crumbs()
        if store.data.is_loading.value:
            content_container.content = _loading_view()
        elif store.path.is_at_root:
            content_container.content = _list_view()
        else:
            content_container.content = _detail_view()
        page.update()

    def _sync_status() -> None:
        status_text.value = store.app.status_text.value
        entries = store.app.logs.value
        if entries:
            status_text.color = get_log_color(entries[-1].get("level", "info"))
        page.update()

    # --- Listener Bindings ---
    store.data.movies.listen(_render)
    store.data.is_loading.listen(_render)
    store.path.path.listen(_render)
    store.app.status_text.listen(_sync_status)
    store.app.logs.listen(_sync_status)

    bar = ft.Container(
        bgcolor=BG_BAR,
        padding=ft.padding.symmetric(horizontal=8, vertical=4),
        content=ft.Row([back_button, crumbs_row, status_text], spacing=8),
    )

    chrome = ft.Container(
        expand=True,
        gradient=ft.LinearGradient(
            begin=ft.Alignment.TOP_LEFT,
            end=ft.Alignment.BOTTOM_RIGHT,
            colors=[BG_GRADIENT_START, BG_GRADIENT_END],
        ),
        content=ft.Column([bar, content_container], spacing=0, expand=True),
    )

    _sync_crumbs()
    content_container.content = _loading_view() if not store.data.is_loaded.value else _list_view()

    return ft.View(route="/", controls=[chrome], padding=0)
