# pagecraft/composition/compositor.py
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
import logging
from typing import List, Optional, Sequence, Union

from flask import current_app

from pagecraft.normalizers.page import normalize_page_meta
from .isolation import run_section
from .loader import load_sections
from .outcomes import NotFound
from .registry import SectionTypeRegistry, default_registry
from .render_model import PageRenderModel, RenderedSection, SectionOmitted, SectionRef, SectionResult
from .resolver import resolve_page

logger = logging.getLogger(__name__)


def compose_page(
    slug: str,
    *,
    registry: Optional[SectionTypeRegistry] = None,
    max_workers: Optional[int] = None,
) -> Union[PageRenderModel, NotFound]:
    """
    Compose the render model for a page.

    Flow:
    - resolve the slug (NotFound ends here, before any section work)
    - load visible section references in render order
    - run every section through its adapter, isolated
    - fold the results back in loader order

    RepositoryError from the resolver, the loader or any adapter propagates.
    A page without visible sections composes to an empty model.
    """
    registry = registry or default_registry

    page = resolve_page(slug)
    if isinstance(page, NotFound):
        logger.info("Page not found: slug=%s", slug)
        return page

    refs = load_sections(page)
    page_meta = normalize_page_meta(page)

    if max_workers is None:
        max_workers = current_app.config.get("COMPOSE_MAX_WORKERS", 1)

    results = run_sections(refs, registry, max_workers=max_workers)
    model = fold_render_model(page_meta, results)

    if model.omitted:
        logger.warning(
            "Page composed with omissions: slug=%s rendered=%d omitted=%d",
            slug,
            len(model.sections),
            len(model.omitted),
        )
    return model


def run_sections(
    refs: Sequence[SectionRef],
    registry: SectionTypeRegistry,
    *,
    max_workers: int = 1,
) -> List[SectionResult]:
    """
    Run all sections, returning results indexed like `refs`.

    With more than one worker the sections are dispatched to a thread pool.
    Each worker pushes its own app context, so it gets its own DB session.
    """
    if max_workers <= 1 or len(refs) <= 1:
        return [run_section(ref, registry, index) for index, ref in enumerate(refs)]

    app = current_app._get_current_object()

    def _run_in_app_context(ref, index):
        with app.app_context():
            return run_section(ref, registry, index)

    results: List[Optional[SectionResult]] = [None] * len(refs)
    executor = ThreadPoolExecutor(
        max_workers=min(max_workers, len(refs)),
        thread_name_prefix="compose",
    )
    try:
        futures = {
            executor.submit(_run_in_app_context, ref, index): index
            for index, ref in enumerate(refs)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    except BaseException:
        # Storage fault or aborted request: drop whatever has not started yet
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)

    return results  # type: ignore[return-value]


def fold_render_model(page_meta, results: Sequence[SectionResult]) -> PageRenderModel:
    rendered: List[RenderedSection] = []
    omitted: List[SectionOmitted] = []

    for result in results:
        if isinstance(result, SectionOmitted):
            omitted.append(result)
        else:
            rendered.append(result)

    return PageRenderModel(page=page_meta, sections=tuple(rendered), omitted=tuple(omitted))
