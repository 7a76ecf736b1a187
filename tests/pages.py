"""HTML documents shared by the test modules."""

_PARAGRAPH = (
    "Each mug is thrown by hand on the wheel, trimmed the next morning, "
    "glazed with our own stoneware recipes and fired twice in the studio kiln. "
)

BODY_TEXT = _PARAGRAPH * 20  # 520 words

PERFECT_PAGE = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Handmade Ceramic Mugs | Clayworks</title>
  <meta name="description" content="Browse handmade ceramic mugs thrown and glazed in small batches at the Clayworks studio.">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="robots" content="index, follow">
  <link rel="canonical" href="https://clayworks.example/mugs">
  <link rel="icon" href="/favicon.ico">
  <meta property="og:title" content="Handmade Ceramic Mugs">
  <meta property="og:image" content="https://clayworks.example/og/mugs.jpg">
  <meta name="twitter:card" content="summary_large_image">
  <style>body {{ font-family: serif; }}</style>
</head>
<body>
  <nav><a href="/">Home</a> <a href="/mugs">Mugs</a></nav>
  <main>
    <article>
      <section>
        <h1>Handmade Ceramic Mugs</h1>
        <h2>How they are made</h2>
        <p>{BODY_TEXT}</p>
        <img src="/img/speckled-mug.jpg" alt="Blue speckled mug" width="640" height="480">
        <form>
          <label for="email">Email</label>
          <input id="email" type="email">
          <input type="hidden" name="token" value="abc">
          <input type="submit" value="Subscribe">
        </form>
        <a href="https://glaze-supplier.example" target="_blank" rel="noopener">Our glaze supplier</a>
      </section>
    </article>
  </main>
  <footer>Clayworks studio</footer>
  <script>window.analytics = {{ page: "mugs" }};</script>
</body>
</html>
"""


def with_body(fragment: str) -> str:
    """Return PERFECT_PAGE with extra markup appended to its body."""
    return PERFECT_PAGE.replace("</footer>", "</footer>\n" + fragment, 1)


def page(body: str = "", head: str = "") -> str:
    """A bare document around the given head and body markup."""
    return f"<html><head>{head}</head><body>{body}</body></html>"
