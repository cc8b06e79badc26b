from til_creator.models import DateStamp
from til_creator.template import SECTION_HEADERS, TilTemplate


def test_template_contains_date_header():
    rendered = TilTemplate().render(DateStamp(2024, 3, 7))

    assert rendered.splitlines()[0] == "## 📅 2024-03-07"


def test_template_lists_sections_in_order():
    rendered = TilTemplate().render(DateStamp(2024, 3, 7))

    positions = [rendered.index(header) for header in SECTION_HEADERS]
    assert positions == sorted(positions)
    assert len(SECTION_HEADERS) == 4


def test_template_has_code_block_placeholder():
    rendered = TilTemplate().render(DateStamp(2024, 3, 7))

    assert "```js\n// 코드\n```" in rendered
    assert rendered.index("```js") > rendered.index("### 💻 코드 예시")


def test_template_is_pure():
    template = TilTemplate()
    stamp = DateStamp(2024, 3, 7)

    assert template.render(stamp) == template.render(stamp)
    assert template.render(stamp).endswith("- \n")


def test_template_pads_single_digit_dates():
    rendered = TilTemplate().render(DateStamp(2025, 1, 2))
    assert "## 📅 2025-01-02" in rendered
