from content_pipeline.output.sanitize import is_safe_url, sanitize_html


def test_unknown_elements_are_unwrapped():
    html = sanitize_html("<p><custom-widget>kept text</custom-widget></p>")

    assert html == "<p>kept text</p>"


def test_disallowed_attributes_are_dropped():
    html = sanitize_html('<p style="color:red" class="x" id="intro">Hi</p>')

    assert html == '<p id="intro">Hi</p>'


def test_nested_dropped_elements():
    html = sanitize_html("<form><button>Go</button><script>x()</script></form><p>after</p>")

    assert html == "<p>after</p>"


def test_comments_are_removed():
    assert sanitize_html("<p>a<!-- <script>x</script> --></p>") == "<p>a</p>"


def test_is_safe_url():
    assert is_safe_url("https://nextjs.org/docs")
    assert is_safe_url("/posts/preview")
    assert is_safe_url("#top")
    assert is_safe_url("mailto:team@example.com")
    assert not is_safe_url("javascript:alert(1)")
    assert not is_safe_url("  JaVaScRiPt:alert(1)")
    assert not is_safe_url("java\tscript:alert(1)")
    assert not is_safe_url("data:text/html;base64,PHNjcmlwdD4=")
    assert not is_safe_url("vbscript:msgbox(1)")
