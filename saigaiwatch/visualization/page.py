"""Single-page HTML renderer for Saigai Watch.

Produces a self-contained page: header with localized static text, the event
list (or its status message), a Folium/Leaflet map, and a small script that
wires cards to markers in the browser the same way CrossLinkBinder does in
process. Rendering only, no data transformation.
"""

from __future__ import annotations

import html
import json
import logging
import re
from pathlib import Path
from typing import Any, Optional

from config.defaults import FLASH_COLOR, FLASH_DURATION_SECONDS, FLY_TO_ZOOM
from saigaiwatch.visualization.map_presenter import MapPresenter
from saigaiwatch.visualization.theme import DARK_THEME, LIGHT_THEME

logger = logging.getLogger(__name__)


def _css_vars(palette: Any) -> str:
    return " ".join(f"{name}: {value};" for name, value in palette.items())


def _page_css() -> str:
    return f"""
  body {{ {_css_vars(LIGHT_THEME)}
    background: var(--color-bg); color: var(--color-text);
    font-family: 'Inter', 'Segoe UI', 'Hiragino Sans', sans-serif; margin: 0; }}
  body.dark-mode {{ {_css_vars(DARK_THEME)} }}
  #sidebar {{ position: fixed; left: 0; top: 0; bottom: 0; width: 40%;
    overflow-y: auto; padding: 16px 20px; box-sizing: border-box;
    background: var(--color-bg); }}
  #sidebar h1 {{ font-size: 20px; color: var(--color-primary); margin: 0 0 8px; }}
  #description-text {{ color: var(--color-muted); font-size: 13px; }}
  .controls {{ display: flex; gap: 12px; align-items: center; margin: 10px 0 16px; }}
  .controls a, .controls label {{ font-size: 12px; color: var(--color-text); }}
  .earthquake-card {{ background: var(--color-panel); border: 1px solid var(--color-border);
    border-left: 6px solid; border-radius: 6px; padding: 10px 14px; margin-bottom: 10px;
    cursor: pointer; transition: background-color 0.2s; }}
  .card-title {{ display: flex; justify-content: space-between; gap: 12px; }}
  .card-title h2 {{ font-size: 14px; margin: 0; }}
  .magnitude {{ font-weight: 700; font-size: 18px; }}
  .earthquake-card p {{ margin: 4px 0; font-size: 12px; }}
  .status-error {{ color: var(--color-primary); }}
  footer {{ margin-top: 20px; color: var(--color-muted); font-size: 11px; }}
"""


def _crosslink_script(map_name: str, links: list) -> str:
    """Browser-side card/marker wiring, run after Leaflet objects exist."""
    return f"""
window.addEventListener("load", function() {{
  var map = window[{json.dumps(map_name)}];
  var links = {json.dumps(links)};
  links.forEach(function(link) {{
    var card = document.getElementById(link.card_id);
    var marker = window[link.marker];
    if (!card || !marker) {{ return; }}
    var timer = null;
    card.onclick = function() {{
      map.flyTo([link.lat, link.lon], {FLY_TO_ZOOM});
      marker.openPopup();
    }};
    marker.on("click", function() {{
      card.scrollIntoView({{behavior: "smooth", block: "center"}});
      var original = card.dataset.bg || card.style.backgroundColor;
      card.dataset.bg = original;
      card.style.backgroundColor = {json.dumps(FLASH_COLOR)};
      if (timer) {{ clearTimeout(timer); }}
      timer = setTimeout(function() {{
        card.style.backgroundColor = original;
        delete card.dataset.bg;
        timer = null;
      }}, {int(FLASH_DURATION_SECONDS * 1000)});
    }});
  }});
  var toggle = document.getElementById("dark-mode-toggle");
  if (toggle) {{
    toggle.onchange = function() {{ document.body.classList.toggle("dark-mode", toggle.checked); }};
  }}
}});
"""


def _sidebar_html(state: Any, alternate_href: Optional[str]) -> str:
    static = state.static_text
    list_view = state.list_view

    parts = [
        '<div id="sidebar">\n',
        f'<h1>{html.escape(static.get("heading", ""))}</h1>\n',
        f'<p id="description-text">{html.escape(static.get("description", ""))}</p>\n',
        '<div class="controls">\n',
    ]
    if alternate_href:
        parts.append(
            f'  <a id="toggle-lang" href="{html.escape(alternate_href)}">'
            f'{html.escape(static.get("lang_button", ""))}</a>\n'
        )
    checked = " checked" if state.dark_mode else ""
    parts.append(
        f'  <label><input type="checkbox" id="dark-mode-toggle"{checked}> ◐</label>\n'
        "</div>\n"
        '<div id="earthquake-list">\n'
    )

    if list_view.message:
        css_class = ' class="status-error"' if list_view.is_error else ""
        parts.append(f"<p{css_class}>{html.escape(list_view.message)}</p>\n")
    for card in list_view.cards:
        parts.append(card.to_html())

    parts.append("</div>\n")
    parts.append(f'<footer id="footer-update">{html.escape(state.footer_text)}</footer>\n')
    parts.append("</div>\n")
    return "".join(parts)


def render_page(
    state: Any,
    presenter: Optional[MapPresenter] = None,
    alternate_href: Optional[str] = None,
    output_path: Optional[str | Path] = None,
) -> Optional[str]:
    """Render the application state as a standalone HTML page.

    Args:
        state: AppState after a completed cycle.
        presenter: MapPresenter used to build the Folium map.
        alternate_href: Link target for the language button (the page in the
            other locale). The button is omitted when None.
        output_path: If provided, save the HTML to this path.

    Returns:
        HTML string if rendered successfully, None on error.
    """
    try:
        import folium

        if state.map_view is None:
            logger.warning("Page render: no map view, run a cycle first")
            return None

        presenter = presenter or MapPresenter()
        # Map occupies the right-hand 60%; the sidebar is fixed on the left
        fmap, marker_names = presenter.to_folium(
            state.map_view, position="fixed", left="40%", width="60%"
        )
        root = fmap.get_root()

        root.header.add_child(
            folium.Element(f"<style>{_page_css()}</style>"),
            name="saigaiwatch_css",
        )
        root.header.add_child(
            folium.Element(f"<title>{html.escape(state.static_text.get('document_title', ''))}</title>"),
            name="saigaiwatch_title",
        )
        root.html.add_child(
            folium.Element(_sidebar_html(state, alternate_href)), name="saigaiwatch_sidebar"
        )

        links = [
            {
                "card_id": link.card.card_id,
                "marker": marker_names[record_id],
                "lat": link.marker.location[0],
                "lon": link.marker.location[1],
            }
            for record_id, link in state.links.items()
            if record_id in marker_names
        ]
        root.script.add_child(
            folium.Element(_crosslink_script(fmap.get_name(), links)),
            name="saigaiwatch_crosslink",
        )

        page = root.render()
        page = re.sub(r"<html[^>]*>", f'<html lang="{html.escape(state.locale)}">', page, count=1)
        body_class = "dark-mode" if state.dark_mode else ""
        page = re.sub(r"<body[^>]*>", f'<body class="{body_class}">', page, count=1)

        if output_path:
            from saigaiwatch.io.persistence import write_page

            if not write_page(page, output_path):
                return None

        return page

    except ImportError:
        logger.warning("folium is required for page rendering")
        return None
    except Exception as exc:
        logger.error("Page rendering failed: %s", exc)
        return None
