"""
Message text for list, draft and profile screens (Telegram HTML parse mode).
"""

from html import escape as html_escape
from typing import Sequence

from core.domain.constants import get_sport_emoji
from core.domain.models import Identity, Stadium, StadiumStats
from core.services.stadium_form import StadiumForm
from core.services.stats_service import group_by_sport
from locales import t


def render_stadium_list(stadiums: Sequence[Stadium], lang: str = "en") -> str:
    if not stadiums:
        return t("list_empty", lang)

    lines = [t("list_header", lang, count=len(stadiums))]
    for sport, group in group_by_sport(stadiums).items():
        lines.append("")
        lines.append(f"{get_sport_emoji(sport)} <b>{html_escape(sport)}</b>")
        for stadium in group:
            status = t("visited", lang) if stadium.visited else t("to_visit", lang)
            lines.append(
                f"  • {html_escape(stadium.name)} - {html_escape(stadium.city)} <i>({status})</i>"
            )
    return "\n".join(lines)


def render_draft(form: StadiumForm, lang: str = "en") -> str:
    coords = ""
    if form.lat is not None and form.lng is not None:
        coords = f"🧭 {form.lat:.4f}, {form.lng:.4f}"
    return t(
        "add_draft", lang,
        name=html_escape(form.name or "-"),
        city=html_escape(form.city or "-"),
        sport=html_escape(form.sport or "-"),
        coords=coords,
    )


def render_profile(identity: Identity, stats: StadiumStats, lang: str = "en") -> str:
    text = t(
        "profile", lang,
        username=html_escape(identity.username),
        email=html_escape(identity.email),
        user_id=html_escape(identity.id),
        total=stats.total,
        visited=stats.visited,
        to_visit=stats.to_visit,
        cities=stats.cities,
    )

    if not stats.total:
        return text + t("profile_empty", lang)

    sport_lines = "\n".join(
        f"{get_sport_emoji(item.sport)} {html_escape(item.sport)}: {item.count}"
        for item in stats.by_sport
    )
    recent_lines = "\n".join(
        f"• {html_escape(s.name)} ({html_escape(s.city)}) - "
        f"{t('visited', lang) if s.visited else t('to_visit', lang)}"
        for s in stats.recent
    )
    return (
        text
        + t("profile_by_sport", lang, lines=sport_lines)
        + t("profile_recent", lang, lines=recent_lines)
    )
