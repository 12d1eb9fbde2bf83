import pytest


SEARCH_PAGE_HTML = """
<html>
  <body>
    <div id="content">
      <div class="home_list_entry">
        <div class="link"><a href="https://animetosho.org/view/1">[SubGroup] Twisted Wonderland - S01E06 [1080p]</a></div>
        <div class="date">Today 10:00</div>
        <div class="links">
          <a class="dlink" href="https://animetosho.org/storage/torrent/1/file.torrent">Torrent</a> |
          <a href="magnet:?xt=urn:btih:0123456789abcdef">Magnet</a>
        </div>
      </div>
      <div class="home_list_entry home_list_entry_alt">
        <div class="link"><a href="https://animetosho.org/view/2">[Other] Twisted Wonderland - 06</a></div>
        <div class="links">
          <a class="dlink" href="https://animetosho.org/storage/torrent/2/file.torrent">Torrent</a>
          <a href="https://animetosho.org/storage/nzbs/2/file.nzb">NZB</a>
        </div>
      </div>
      <div class="home_list_entry">
        <div class="link"><a href="https://animetosho.org/view/3">Twisted Wonderland - Episode 6 (no downloads)</a></div>
        <div class="links">
          <a href="https://example.com/release">Website</a>
        </div>
      </div>
    </div>
  </body>
</html>
"""


@pytest.fixture
def search_page_html() -> str:
    return SEARCH_PAGE_HTML
