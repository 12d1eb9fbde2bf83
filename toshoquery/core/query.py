from typing import Optional, List, Dict, Any, Union

from pydantic import ValidationError

from toshoquery.core.errors import QueryValidationError
from toshoquery.core.models import QueryOptions
from toshoquery.utils.helpers import pad2, plain_number
from toshoquery.utils.logger import query_logger


# ===========================
# Options Resolution
# ===========================
def resolve_options(options: Union[QueryOptions, Dict[str, Any], None]) -> QueryOptions:
    if options is None:
        return QueryOptions()

    if isinstance(options, QueryOptions):
        return options

    if not isinstance(options, dict):
        raise QueryValidationError("options must be an object")

    try:
        return QueryOptions.model_validate(options)
    except ValidationError as e:
        errors = e.errors()
        field = ".".join(str(part) for part in errors[0]["loc"]) if errors else ""
        raise QueryValidationError(f"invalid option '{field or 'options'}'") from e


# ===========================
# Episode Variants
# ===========================
def build_variants(season: Any, episode: Any, options: QueryOptions) -> List[str]:
    scope = options.scope
    ep = pad2(episode)
    ep_plain = plain_number(episode)
    variants = []

    if season is not None:
        variants.append(f'{scope}="S{pad2(season)}E{ep}"')
        if options.include_non_padded:
            variants.append(f'{scope}="S{plain_number(season)}E{ep_plain}"')

    variants.append(f'{scope}="E{ep}"')
    variants.append(f'{scope}"Episode {ep_plain}"')
    variants.append(f'{scope}"Ep {ep}"')

    if options.include_non_padded:
        variants.append(f'{scope}="E{ep_plain}"')
        variants.append(f'{scope}"Ep {ep_plain}"')

    # Loosest pattern, matches any release embedding the bare number
    if options.include_loose_numeric:
        variants.append(f'{scope}" {ep} "')

    return variants


def build_exclusions(options: QueryOptions) -> str:
    if not options.strict or not options.exclude_terms:
        return ""

    scope = options.scope
    return " ".join(f'-{scope}"{term}"' for term in options.exclude_terms if term)


# ===========================
# Query Generation
# ===========================
def generate_sphinx_query(
    title: Optional[str],
    season: Any = None,
    episode: Any = None,
    options: Union[QueryOptions, Dict[str, Any], None] = None
) -> str:
    """
    Build an Anime Tosho (Sphinx) query matching one episode of a title.

    The title clause is AND-ed with every textual form the episode number may
    take in a release name. In strict mode each clause is scoped to
    ``options.scope_field`` and batch/compilation releases are excluded.
    Quotes inside the title or exclude terms are not escaped.
    """
    if not title:
        raise QueryValidationError("title is required")
    if episode is None:
        raise QueryValidationError("episode is required")

    options = resolve_options(options)
    scope = options.scope

    variants = build_variants(season, episode, options)
    query = f'{scope}"{str(title).strip()}" & ({" | ".join(variants)})'

    exclusions = build_exclusions(options)
    if exclusions:
        query = f"{query} {exclusions}"

    query_logger.debug(f"Generated query with {len(variants)} variants: {query}")
    return query
