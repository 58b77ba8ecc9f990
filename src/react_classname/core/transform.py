import logging
from pathlib import Path

from react_classname.core.edits import TextEdit, apply_edits
from react_classname.core.injector import find_class_attribute, plan_injection
from react_classname.core.languages import select_grammar
from react_classname.core.matcher import ComponentCandidate, find_components
from react_classname.core.parsing import parse_source
from react_classname.core.paths import is_eligible
from react_classname.core.ports.observer import TransformObserver
from react_classname.core.props import analyze_props
from react_classname.models import ComponentReport, Outcome, TransformOptions, TransformResult

logger = logging.getLogger(__name__)


def transform_source(
    path: str | Path,
    text: str,
    options: TransformOptions | None = None,
    *,
    language: str | None = None,
    observer: TransformObserver | None = None,
) -> TransformResult:
    """Inject class-name plumbing into every recognized component of *text*.

    Raises ``SourceParseError`` if *text* does not parse. Files rejected by
    the path filter come back unchanged without notifying anyone.
    """
    options = options or TransformOptions()
    path_str = str(path)

    if not is_eligible(path_str, options):
        logger.debug("Skipping %s: excluded by path filter", path_str)
        return TransformResult(path=path_str, code=text, changed=False, skipped=True)

    resolved_language = select_grammar(Path(path_str), language)
    source = text.encode("utf-8")
    tree = parse_source(source, resolved_language, path_str)

    edits: list[TextEdit] = []
    reports: list[ComponentReport] = []
    for candidate in find_components(tree, source):
        component_edits, report = _process_component(candidate, source, options)
        edits.extend(component_edits)
        reports.append(report)

    code = apply_edits(source, edits).decode("utf-8") if edits else text
    changed = code != text
    if changed:
        logger.info("Injected %s into %d component(s) in %s", options.class_prop, _count_changed(reports), path_str)

    if options.on_transform is not None:
        options.on_transform(code)
    if observer is not None:
        observer.on_transform(path_str, code)

    return TransformResult(path=path_str, code=code, changed=changed, components=reports)


def transform_file(
    path: str | Path,
    text: str,
    options: TransformOptions | None = None,
    *,
    language: str | None = None,
    observer: TransformObserver | None = None,
) -> str:
    return transform_source(path, text, options, language=language, observer=observer).code


def _process_component(
    candidate: ComponentCandidate, source: bytes, options: TransformOptions
) -> tuple[list[TextEdit], ComponentReport]:
    if candidate.root_element is None:
        logger.debug("%s: no single markup root, leaving unchanged", candidate.name)
        return [], _report(candidate, "skipped", "no single markup root")

    shape = analyze_props(candidate, source, options)
    if not shape.can_inject:
        logger.debug("%s: props are %s, leaving unchanged", candidate.name, shape.status.value)
        return [], _report(candidate, "skipped", shape.status.value)

    class_attr = find_class_attribute(candidate.root_element, source, options.class_prop)
    edits = plan_injection(candidate, shape, class_attr, source, options)
    if not edits:
        logger.debug("%s: class binding already applied", candidate.name)
        return [], _report(candidate, "unchanged", "class binding already applied")

    outcome: Outcome = "injected" if class_attr.is_absent else "merged"
    logger.debug("%s: %s %s", candidate.name, outcome, options.class_prop)
    return edits, _report(candidate, outcome)


def _report(candidate: ComponentCandidate, outcome: Outcome, reason: str | None = None) -> ComponentReport:
    return ComponentReport(
        name=candidate.name,
        kind=candidate.kind.value,
        line=candidate.line,
        outcome=outcome,
        reason=reason,
    )


def _count_changed(reports: list[ComponentReport]) -> int:
    return sum(1 for report in reports if report.outcome in ("injected", "merged"))
