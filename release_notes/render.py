import collections.abc
import enum
import logging
import os

import jinja2

import ci.util
import makoutil
import release_notes.model as rnm

logger = logging.getLogger(__name__)


class TemplateEngine(enum.StrEnum):
    JINJA2 = 'jinja2'
    MAKO = 'mako'


def engine_for(template_file: str) -> TemplateEngine:
    if os.path.splitext(template_file)[1] == '.mako':
        return TemplateEngine.MAKO
    return TemplateEngine.JINJA2


def load_template(template_file: str) -> str:
    with open(template_file, encoding='utf-8') as f:
        return f.read()


def build_context(
    release_version: str,
    tickets: collections.abc.Iterable[str],
    template_data: collections.abc.Mapping | None=None,
) -> dict:
    '''
    creates the template-context. `releaseVersion` and `tickets` are always set from the passed
    values; entries from `template_data` are only added if they do not clash w/ those.
    '''
    context = {
        rnm.RELEASE_VERSION_KEY: release_version,
        rnm.TICKETS_KEY: list(tickets),
    }

    if template_data is None:
        return context

    if not isinstance(template_data, collections.abc.Mapping):
        raise ci.util.Failure(f'template-data must be a mapping, got: {type(template_data)}')

    for key, value in template_data.items():
        if key in context:
            logger.warning(f'ignoring template-data entry {key=} (must not be overwritten)')
            continue
        context[key] = value

    return context


def _jinja2_env() -> jinja2.Environment:
    return jinja2.Environment(
        autoescape=False,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )


def render(
    template_source: str,
    context: collections.abc.Mapping,
    engine: TemplateEngine=TemplateEngine.JINJA2,
) -> str:
    '''
    renders the given template-source. Output is not escaped.

    raises jinja2.TemplateError (or mako-specific exceptions) for syntax-errors, and if
    undefined values are referenced
    '''
    if engine is TemplateEngine.JINJA2:
        template = _jinja2_env().from_string(template_source)
        return template.render(context)
    elif engine is TemplateEngine.MAKO:
        return makoutil.render(template_source, **context)
    else:
        raise ValueError(engine)
