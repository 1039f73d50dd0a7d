import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


def markdown_to_html(text: str | None) -> str:
    if not text:
        return ""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")
