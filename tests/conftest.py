"""Shared fixtures: hand-built work pages shaped like the archive's markup."""
import pytest
from bs4 import BeautifulSoup

DEFAULT = object()


def tag_list(css_class, tags):
    """Render a comma-list tag region; ``tags`` holds (name, href or None)."""
    items = []
    for name, href in tags:
        if href is None:
            items.append(f'<li><a class="tag">{name}</a></li>')
        else:
            items.append(f'<li><a class="tag" href="{href}">{name}</a></li>')
    return (
        f'<dt class="{css_class} tags">{css_class.title()}:</dt>'
        f'<dd class="{css_class} tags"><ul class="commas">{"".join(items)}</ul></dd>'
    )


DEFAULTS = {
    'title': '\n   A Quiet Place\n',
    'author': '<a rel="author" href="/users/writer/pseuds/writer">writer</a>',
    'published': '2024-08-01',
    'updated': '2024-09-15',
    'language': 'English',
    'words': '12,345',
    'hits': '1,024',
    'ratings': [('Teen And Up Audiences', '/tags/Teen%20And%20Up%20Audiences/works')],
    'warnings': [('No Archive Warnings Apply', '/tags/No%20Archive%20Warnings%20Apply/works')],
    'relationships': [('Alice/Bob', '/tags/Alice*s*Bob/works')],
    'characters': [
        ('Alice', '/tags/Alice/works'),
        ('Bob', '/tags/Bob/works'),
    ],
    'freeform': [
        ('Fluff', '/tags/Fluff/works'),
        ('Angst', '/tags/Angst/works'),
        ('Slow Burn', '/tags/Slow%20Burn/works'),
    ],
    'chapters': [('1. Beginnings', '1001'), ('2. Endings', '1002')],
    'body': [
        'Hello <strong>world</strong>!',
        '<em>Softly</em>, she said.',
        'Plain text only.',
    ],
}


def render_work_page(**overrides):
    """
    Render a work page.

    Every keyword of ``DEFAULTS`` can be overridden; passing None leaves the
    whole region out of the page.
    """
    values = dict(DEFAULTS)
    values.update(overrides)

    def region(key, html):
        return '' if values[key] is None else html

    stats = ''.join([
        region('published', f'<dt class="published">Published:</dt><dd class="published">{values["published"]}</dd>'),
        region('updated', f'<dt class="status">Updated:</dt><dd class="status">{values["updated"]}</dd>'),
        region('words', f'<dt class="words">Words:</dt><dd class="words">{values["words"]}</dd>'),
        '<dt class="chapters">Chapters:</dt><dd class="chapters">2/?</dd>',
        region('hits', f'<dt class="hits">Hits:</dt><dd class="hits">{values["hits"]}</dd>'),
    ])

    meta = ''.join([
        region('ratings', tag_list('rating', values['ratings'] or [])),
        region('warnings', tag_list('warning', values['warnings'] or [])),
        region('relationships', tag_list('relationship', values['relationships'] or [])),
        region('characters', tag_list('character', values['characters'] or [])),
        region('freeform', tag_list('freeform', values['freeform'] or [])),
        region('language', f'<dt class="language">Language:</dt><dd class="language" lang="en">{values["language"]}</dd>'),
        f'<dt class="stats">Stats:</dt><dd class="stats"><dl class="stats">{stats}</dl></dd>',
    ])

    options = []
    for name, value in values['chapters'] or []:
        if value is None:
            options.append(f'<option>{name}</option>')
        else:
            options.append(f'<option value="{value}">{name}</option>')
    chapter_menu = region(
        'chapters',
        '<ul class="work navigation actions"><li class="chapter" id="chapter_index">'
        '<form><select name="selected_id" id="selected_id">'
        f'{"".join(options)}</select></form></li></ul>',
    )

    preface = ''.join([
        region('title', f'<h2 class="title heading">{values["title"]}</h2>'),
        region('author', f'<h3 class="byline heading">{values["author"]}</h3>'),
    ])

    body = region(
        'body',
        '<div id="chapters" role="article"><div class="chapter">'
        '<div class="userstuff module" role="article">'
        '<h3 class="landmark heading" id="work">Chapter Text</h3>'
        + ''.join(f'<p>{p}</p>' for p in values['body'] or [])
        + '</div></div></div>',
    )

    return (
        '<!DOCTYPE html><html><head><title>Work</title></head><body>'
        '<div id="outer"><div id="main" class="works-show region">'
        f'{chapter_menu}'
        f'<div class="wrapper"><dl class="work meta group">{meta}</dl></div>'
        f'<div id="workskin"><div class="preface group">{preface}</div>{body}</div>'
        '</div></div></body></html>'
    )


NOT_FOUND_PAGE = (
    '<!DOCTYPE html><html><body><div id="outer"><div id="main" '
    'class="system errors error-404 region">'
    '<h2 class="heading">Error 404</h2><p>The page you were looking for doesn\'t exist.</p>'
    '</div></div></body></html>'
)


@pytest.fixture
def make_page():
    """Factory fixture rendering a work page with overrides."""
    return render_work_page


@pytest.fixture
def work_page():
    return render_work_page()


@pytest.fixture
def not_found_page():
    return NOT_FOUND_PAGE


@pytest.fixture
def soup():
    """Parse markup the same way the assembler does."""
    def _parse(html):
        return BeautifulSoup(html, 'lxml')
    return _parse
