import threading

import mako.template

'''
workaround bug in mako use lock to sequentialise invocations of mako.template.Template
see: https://github.com/sqlalchemy/mako/issues/378
'''
template_lock = threading.Lock()


def render(template_source: str, **kwargs) -> str:
    '''
    renders the given mako-template-source. Referencing names absent from kwargs raises NameError.
    '''
    with template_lock:
        template = mako.template.Template(
            text=template_source,
            strict_undefined=True,
        )
        return template.render(**kwargs)
