"""Base formatter class for reportkit output formats.

A Formatter implements one or more output formats and is registered with
one or more Renderer classes. The renderer picks the formatter for the
requested format, fills in data, format and options, then runs the
formatter's build stages in its own order.

    class ReverseRenderer(Renderer):
        stages = ("reversed_header", "reversed_body")

    class ReversedText(Formatter):

        @stage("reversed_header")
        def reversed_header(self):
            self.output.write(f"{self.options.header_text}\\n")
            self.output.write("The reversed text will follow\\n")

        @stage("reversed_body")
        def reversed_body(self):
            self.output.write(self.data[::-1] + "\\n")

    ReversedText.renders("txt", for_=ReverseRenderer)

    ReverseRenderer.render("txt", data="apple", header_text="Hello Mike, Hello Joe!")
"""

import io
import logging
import re
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from jinja2 import BaseLoader, Environment

from ..exceptions import UnsupportedOperationError
from ..options import Options
from ..registry import FormatterRegistry, get_formatter_registry
from .rendering import RenderingTools
from .template import Template

logger = logging.getLogger(__name__)

_STAGE_MARKER = "_reportkit_stage"
_BUILD_PREFIX = "build_"
_TEMPLATE_FILE = re.compile(r"\.(j2|jinja2?)$")

_jinja_env = Environment(
    loader=BaseLoader(),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def stage(name: str) -> Callable:
    """Declare a method as the procedure for a named build stage.

    Args:
        name: Stage name, as listed in a Renderer's stages

    Returns:
        Decorator that marks the method and returns it unchanged
    """
    def decorator(func: Callable) -> Callable:
        setattr(func, _STAGE_MARKER, name)
        return func
    return decorator


def _stage_alias(attr: str) -> Callable:
    # Looked up by name on every call so subclass overrides of attr win.
    def build_stage(self):
        return getattr(self, attr)()

    build_stage.__name__ = _BUILD_PREFIX + attr
    return build_stage


class Formatter(RenderingTools):
    """Base class for output formatters.

    Attributes:
        data: Payload set by the renderer
        format: Active format identifier
        registry: Registry this formatter resolves formats and renderers in
    """

    registry: Optional[FormatterRegistry] = None
    binary_output = False

    _stages: Dict[str, str] = {}
    _save_mode = "w"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        stages = {}
        for attr, value in list(cls.__dict__.items()):
            marker = getattr(value, _STAGE_MARKER, None)
            if marker:
                stages[marker] = attr
                if _BUILD_PREFIX + marker not in cls.__dict__:
                    setattr(cls, _BUILD_PREFIX + marker, _stage_alias(attr))
            elif attr.startswith(_BUILD_PREFIX) and callable(value):
                stages.setdefault(attr[len(_BUILD_PREFIX):], attr)
        cls._stages = stages

    def __init__(self, registry: Optional[FormatterRegistry] = None):
        self.registry = registry or type(self).registry or get_formatter_registry()
        self.data: Any = None
        self.format: Optional[str] = None
        self._options: Optional[Options] = None
        self._output = None

    # -- class-level declarations ------------------------------------------

    @classmethod
    def renders(
        cls,
        formats: Union[str, Iterable[str]],
        for_=None,
        registry: Optional[FormatterRegistry] = None
    ) -> None:
        """Register this formatter with one or more renderers.

            TextFormatter.renders("text", for_=TableRenderer)
            CSVFormatter.renders(["csv", "tsv"], for_=[TableRenderer, RowRenderer])

        Args:
            formats: Format identifier or list of identifiers
            for_: Renderer class or list of renderer classes
            registry: Registry to record into (default: class or global registry)
        """
        registry = registry or cls.registry or get_formatter_registry()
        registry.register(cls, formats, for_)

    @classmethod
    def formats(cls, registry: Optional[FormatterRegistry] = None) -> List[str]:
        """Return the formats this formatter has been registered for."""
        registry = registry or cls.registry or get_formatter_registry()
        return registry.formats_for(cls)

    @classmethod
    def build(cls, name: str, procedure: Callable) -> None:
        """Install a procedure as a build stage of this class.

        The procedure is called with the formatter instance, so it can
        read data, options and output. It replaces any build_<name>
        method this class defines.
        """
        def build_stage(self):
            return procedure(self)

        build_stage.__name__ = _BUILD_PREFIX + name
        build_stage.__doc__ = getattr(procedure, "__doc__", None)
        setattr(cls, _BUILD_PREFIX + name, build_stage)
        if "_stages" not in cls.__dict__:
            cls._stages = {}
        cls._stages[name] = _BUILD_PREFIX + name

    @classmethod
    def opt_reader(cls, *names: str) -> None:
        """Expose options as read-only attributes.

            CSVFormatter.opt_reader("show_table_headers")
            formatter.show_table_headers == formatter.options.show_table_headers
        """
        for name in names:
            setattr(cls, name, property(
                lambda self, _name=name: self.options[_name],
                doc=f"Shortcut for options.{name}."
            ))

    @classmethod
    def save_as_binary_file(cls) -> None:
        """Make save_output write in binary mode."""
        cls._save_mode = "wb"

    @classmethod
    def new_buffer(cls):
        """Return an empty output buffer of the right kind for this class."""
        return io.BytesIO() if cls.binary_output else io.StringIO()

    @classmethod
    def stage_names(cls) -> List[str]:
        """Return every stage name this class implements, inherited ones included."""
        names: List[str] = []
        for klass in reversed(cls.__mro__):
            for name in klass.__dict__.get("_stages", {}):
                if name not in names:
                    names.append(name)
        return names

    # -- stages ----------------------------------------------------------------

    def _find_stage(self, name: str) -> Optional[Callable]:
        procedure = getattr(type(self), _BUILD_PREFIX + name, None)
        return procedure if callable(procedure) else None

    def has_stage(self, name: str) -> bool:
        return self._find_stage(name) is not None

    def run_stage(self, name: str, missing_ok: bool = False) -> Any:
        """Run a build stage by name.

        Args:
            name: Stage name
            missing_ok: Return None instead of raising when the stage is missing

        Returns:
            Whatever the stage procedure returns

        Raises:
            UnsupportedOperationError: If the stage is missing and missing_ok is False
        """
        procedure = self._find_stage(name)
        if procedure is None:
            if missing_ok:
                return None
            raise UnsupportedOperationError(_BUILD_PREFIX + name, type(self).__name__)
        return procedure(self)

    def call_named(self, name: str, block: Callable[[], Any]) -> Any:
        """Run block only when name is the active format.

        Args:
            name: A format this formatter is registered for
            block: Zero-argument callable

        Returns:
            The block's result, or None when another format is active

        Raises:
            UnsupportedOperationError: If name is not a registered format
        """
        if name not in self.registry.formats_for(type(self)):
            raise UnsupportedOperationError(name, type(self).__name__)
        if self.format == name:
            return block()
        return None

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        if name in self.registry.formats_for(type(self)):
            return lambda block: self.call_named(name, block)

        raise UnsupportedOperationError(name, type(self).__name__)

    # -- options and templates ---------------------------------------------

    @property
    def options(self) -> Options:
        """Formatting options, created empty on first access."""
        if self._options is None:
            self._options = Options()
        return self._options

    @options.setter
    def options(self, value: Union[Options, Dict[str, Any], None]) -> None:
        if value is not None and not isinstance(value, Options):
            value = Options(value)
        self._options = value

    @property
    def template(self) -> Template:
        """The Template named by options.template."""
        return Template.get(self.options.template)

    def apply_template(self) -> None:
        """Fill unset options from the template named by options.template."""
        if self.options.template is None:
            return
        self.template.apply(self.options)
        logger.debug(f"Applied template {self.options.template!r} to {type(self).__name__}")

    def render_template(self, source: Union[str, Path], **context) -> str:
        """Render a Jinja2 template string or template file.

        Sources ending in .j2, .jinja or .jinja2 are read from disk.
        The formatter, data and options are available in the template
        unless overridden by context.
        """
        source = str(source)
        if _TEMPLATE_FILE.search(source):
            source = Path(source).read_text(encoding="utf-8")

        values = {"formatter": self, "data": self.data, "options": self.options}
        values.update(context)
        return _jinja_env.from_string(source).render(**values)

    # -- output ------------------------------------------------------------

    @property
    def output(self):
        """The sink stages write to.

        This is options.io when the caller supplied one, otherwise a private
        buffer kept for the lifetime of the formatter.
        """
        if self.options.io is not None:
            return self.options.io
        if self._output is None:
            self._output = self.new_buffer()
        return self._output

    def output_value(self):
        """Return everything written to the output so far."""
        sink = self.output
        getvalue = getattr(sink, "getvalue", None)
        return getvalue() if callable(getvalue) else sink

    def clear_output(self) -> None:
        """Empty the private output buffer.

        A sink supplied through options.io belongs to the caller and is
        left untouched.
        """
        if self.options.io is not None:
            logger.debug("clear_output() skipped: output is an external sink")
            return
        if self._output is not None:
            self._output.seek(0)
            self._output.truncate(0)

    def save_output(self, filename: Union[str, Path]) -> None:
        """Write the full output to a file, replacing its contents.

        Args:
            filename: Destination path

        Raises:
            OSError: If the file cannot be written
        """
        content = self.output_value()
        if self._save_mode == "wb":
            if isinstance(content, str):
                content = content.encode("utf-8")
            with open(filename, "wb") as f:
                f.write(content)
        else:
            with open(filename, "w", encoding="utf-8") as f:
                f.write(content)
        logger.debug(f"Saved {type(self).__name__} output to {filename}")


class BinaryFormatter(Formatter):
    """Base class for binary and paginated output formats.

    Output is accumulated in a BytesIO, saved in binary mode, and nested
    renders triggered from rendering helpers are captured in their own
    buffers rather than appended to this formatter's output.
    """

    binary_output = True


BinaryFormatter.save_as_binary_file()
