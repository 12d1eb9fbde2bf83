from typing import Dict, Any, Optional, Tuple

from starlette.datastructures import QueryParams

from toshoquery.config.settings import settings
from toshoquery.core.errors import UpstreamError
from toshoquery.core.models import QueryOptions
from toshoquery.core.query import generate_sphinx_query
from toshoquery.scrapers.animetosho import scrape, fetch_search_page
from toshoquery.utils.helpers import encode_uri_component, parse_bool_param, parse_exclude_terms
from toshoquery.utils.logger import scraper_logger


# ===========================
# Options From Query Parameters
# ===========================
def build_search_options(params: QueryParams) -> QueryOptions:
    options = {
        "strict": parse_bool_param(params.get("strict"), default=True),
        "include_loose_numeric": parse_bool_param(params.get("includeLooseNumeric")),
        "include_non_padded": parse_bool_param(params.get("includeNonPadded")),
        "scope_field": params.get("scopeField") or settings.DEFAULT_SCOPE_FIELD,
    }

    exclude_terms = parse_exclude_terms(params.getlist("excludeTerms"))
    if exclude_terms is not None:
        options["exclude_terms"] = exclude_terms

    return QueryOptions(**options)


# ===========================
# Search Service Class
# ===========================
class SearchService:

    def build_url(self, query: str) -> str:
        return settings.get_search_url(encode_uri_component(query))

    async def search(
        self,
        title: Optional[str],
        season: Optional[str],
        episode: Optional[str],
        options: QueryOptions
    ) -> Tuple[int, Dict[str, Any]]:
        query = generate_sphinx_query(title, season, episode, options)
        url = self.build_url(query)

        status_code, html = await fetch_search_page(url)

        try:
            results = scrape(html)
        except Exception as e:
            scraper_logger.error(f"Parse failed: {type(e).__name__}")
            raise UpstreamError(f"failed to parse search results: {e}") from e

        scraper_logger.debug(f"Search '{title}' S{season}E{episode}: {len(results)} results (HTTP {status_code})")

        return status_code, {
            "query": query,
            "url": url,
            "count": len(results),
            "results": [entry.to_dict() for entry in results]
        }

    async def search_params(self, params: QueryParams) -> Tuple[int, Dict[str, Any]]:
        return await self.search(
            title=params.get("title"),
            season=params.get("season"),
            episode=params.get("episode"),
            options=build_search_options(params)
        )


# ===========================
# Global Search Service Instance
# ===========================
search_service = SearchService()
