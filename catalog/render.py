"""
Card renderer.

render() projects an ordered subset of entries into a CatalogView:
    - banner:        '"<term>" - N resultados encontrados' (only when searching)
    - empty_message: shown instead of cards when nothing matched
    - cards:         title, creation year, description, tag chips, website link

to_html() turns a CatalogView into the HTML fragment of the card container.
The tree is built node by node with BeautifulSoup so every text value is
escaped.

Tag colors are cosmetic: each chip draws one class from TAG_COLORS at random
on every render.
"""

import random
from collections.abc import Callable, Sequence

from bs4 import BeautifulSoup
from pydantic import BaseModel

from catalog.models import Entry

TAG_COLORS = ("tag-color-1", "tag-color-2", "tag-color-3", "tag-color-4", "tag-color-5")

EMPTY_MESSAGE = "Nenhum resultado encontrado."
YEAR_LABEL    = "Ano de Criação: "
LINK_TEXT     = "Website"
LINK_TARGET   = "_blank"
LINK_REL      = "noopener noreferrer"


class TagChip(BaseModel):
    text: str
    color: str


class CardLink(BaseModel):
    href: str
    target: str = LINK_TARGET
    rel: str = LINK_REL
    text: str = LINK_TEXT


class Card(BaseModel):
    title: str
    year_label: str = YEAR_LABEL
    year: int
    description: str
    tags: list[TagChip]
    link: CardLink


class CatalogView(BaseModel):
    banner: str | None = None
    empty_message: str | None = None
    cards: list[Card] = []

    @property
    def count(self) -> int:
        return len(self.cards)


def results_banner(search_term: str, count: int) -> str | None:
    """Result-count text for a search; None when there is no search term."""
    if not search_term:
        return None
    s = "" if count == 1 else "s"
    return f'"{search_term}" - {count} resultado{s} encontrado{s}'


def _card(entry: Entry, rng: random.Random) -> Card:
    return Card(
        title=entry.name,
        year=entry.creation_year,
        description=entry.description,
        tags=[TagChip(text=tag, color=rng.choice(TAG_COLORS)) for tag in entry.tags],
        link=CardLink(href=entry.link),
    )


def render(
    entries: Sequence[Entry],
    search_term: str,
    rng: random.Random | None = None,
) -> CatalogView:
    rng = rng or random.Random()
    banner = results_banner(search_term, len(entries))
    if not entries:
        return CatalogView(banner=banner, empty_message=EMPTY_MESSAGE)
    return CatalogView(banner=banner, cards=[_card(e, rng) for e in entries])


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def to_html(view: CatalogView, tag_href: Callable[[str], str] | None = None) -> str:
    """
    Build the card container markup.

    tag_href: when given, each chip is an <a> pointing at tag_href(tag) so a
    click can trigger a search by that tag; otherwise chips are <span>s.
    """
    soup = BeautifulSoup("", "html.parser")
    container = soup.new_tag("div", attrs={"class": "card-container"})
    soup.append(container)

    if view.banner is not None:
        info = soup.new_tag("p", attrs={"class": "search-info"})
        info.string = view.banner
        container.append(info)

    if view.empty_message is not None:
        msg = soup.new_tag(
            "p",
            attrs={"class": "empty-state", "style": "text-align: center; width: 100%;"},
        )
        msg.string = view.empty_message
        container.append(msg)
        return str(soup)

    for card in view.cards:
        article = soup.new_tag("article", attrs={"class": "card"})
        content = soup.new_tag("div")

        h2 = soup.new_tag("h2")
        h2.string = card.title

        p_year = soup.new_tag("p")
        strong = soup.new_tag("strong")
        strong.string = card.year_label
        p_year.append(strong)
        p_year.append(str(card.year))

        p_desc = soup.new_tag("p")
        p_desc.string = card.description

        tags = soup.new_tag("div", attrs={"class": "tags-container"})
        for chip in card.tags:
            if tag_href is None:
                node = soup.new_tag("span")
            else:
                node = soup.new_tag("a", attrs={"href": tag_href(chip.text), "target": "_self"})
            node["class"] = ["tag", chip.color]
            node.string = chip.text
            tags.append(node)

        content.extend([h2, p_year, p_desc, tags])

        link = soup.new_tag(
            "a",
            attrs={"href": card.link.href, "target": card.link.target, "rel": card.link.rel},
        )
        link.string = card.link.text

        article.append(content)
        article.append(link)
        container.append(article)

    return str(soup)
