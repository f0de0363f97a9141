from docrender import RenderOptions


def test_scenario_headings_and_callout(render):
    text = "# Title\n## Title\n::: warn Careful\nThis is a warning.\n:::\n"
    document, soup = render(text)

    assert [h.id for h in document.headings] == ["toc-title", "toc-title-1"]
    assert [h.level for h in document.headings] == [1, 2]
    assert len(document.headings) == 2
    assert soup.find("h1")["id"] == "toc-title"
    assert soup.find("h2")["id"] == "toc-title-1"

    (callout,) = soup.select("div.alert.warn")
    assert callout.find("div", class_="title").get_text().strip() == "Careful"
    assert "This is a warning." in callout.get_text()


def test_repeated_titles_get_increasing_suffixes(render):
    document, _ = render("## Setup\n\n## Setup\n\n### Setup\n\n#### Setup")
    assert [h.id for h in document.headings] == [
        "toc-setup",
        "toc-setup-1",
        "toc-setup-2",
        "toc-setup-3",
    ]


def test_suffix_never_collides_with_literal_title(render):
    document, _ = render("## Title 1\n\n## Title\n\n## Title")
    ids = [h.id for h in document.headings]
    assert ids == ["toc-title-1", "toc-title", "toc-title-2"]
    assert len(set(ids)) == len(ids)


def test_empty_slug_uses_position(render):
    document, _ = render("# Intro\n\n## ???\n\n## !!!")
    assert [h.id for h in document.headings] == [
        "toc-intro",
        "toc-heading-1",
        "toc-heading-2",
    ]


def test_levels_five_and_six_are_not_collected(render):
    document, soup = render("# One\n\n##### Five\n\n###### Six")
    assert [h.title for h in document.headings] == ["One"]
    assert soup.find("h5").get("id") is None
    assert soup.find("h6").get("id") is None


def test_headings_follow_document_order(render):
    text = "## B\n\nText\n\n# A\n\n### C\n\n## D"
    document, soup = render(text)
    assert [h.title for h in document.headings] == ["B", "A", "C", "D"]
    positions = [document.html.index(f'id="{h.id}"') for h in document.headings]
    assert positions == sorted(positions)
    assert [el["id"] for el in soup.find_all(["h1", "h2", "h3", "h4"])] == [
        h.id for h in document.headings
    ]


def test_title_is_plain_text_of_heading(render):
    document, _ = render("## Using `pip` *safely*")
    (heading,) = document.headings
    assert heading.title == "Using pip safely"
    assert heading.id == "toc-using-pip-safely"


def test_cjk_heading(render):
    document, _ = render("## 安装指南")
    assert document.headings[0].id == "toc-安装指南"


def test_raw_heading_inside_callout_shares_counter(render):
    document, _ = render("## Setup\n\n::: info\n<h2>Setup</h2>\n:::")
    assert [h.id for h in document.headings] == ["toc-setup", "toc-setup-1"]


def test_custom_prefix_and_levels(render):
    options = RenderOptions(heading_id_prefix="", toc_levels=(2, 3))
    document, soup = render("# Top\n\n## Mid\n\n### Low", options=options)
    assert [h.id for h in document.headings] == ["mid", "low"]
    assert soup.find("h1").get("id") is None


def test_heading_numbering(render):
    options = RenderOptions(number_headings=True)
    document, _ = render("# A\n\n## B\n\n## C\n\n### D\n\n# E", options=options)
    assert [h.number for h in document.headings] == ["1", "1.1", "1.2", "1.2.1", "2"]


def test_numbering_is_off_by_default(render):
    document, _ = render("# A")
    assert document.headings[0].number is None
    assert document.to_dict()["headings"] == [{"id": "toc-a", "title": "A", "level": 1}]
