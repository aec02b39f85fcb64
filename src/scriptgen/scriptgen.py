"""Core logic for scriptgen."""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext

from scriptgen.errors import MissingTemplateError, ScriptgenError
from scriptgen.extract import extract_command, extract_tagged
from scriptgen.llm import InferenceClient
from scriptgen.models import (
    DEFAULT_SHELL,
    EXPLAIN_TEMPLATE,
    GENERATE_TEMPLATE,
    CommandOptions,
    GenerationResult,
)
from scriptgen.template import render

log = logging.getLogger("scriptgen")

IndicatorFactory = Callable[[str], AbstractContextManager]


def _no_indicator(message: str) -> AbstractContextManager:
    return nullcontext()


class CommandGenerator:
    """Render a prompt, ask the model, extract the answer.

    `templates` maps template names to bodies and is never modified.
    `indicator_factory` is called with a status message and must return a
    context manager that is active while each inference call blocks.
    """

    def __init__(
        self,
        templates: dict[str, str],
        client: InferenceClient | None = None,
        indicator_factory: IndicatorFactory | None = None,
    ) -> None:
        self._templates = templates
        self._client = client if client is not None else InferenceClient()
        self._indicator = indicator_factory or _no_indicator

    def _template(self, name: str) -> str:
        try:
            return self._templates[name]
        except KeyError:
            raise MissingTemplateError(name) from None

    def _ask(self, prompt: str, status: str) -> str:
        with self._indicator(status):
            return self._client.invoke(prompt)

    def generate(self, request: str, shell: str = DEFAULT_SHELL) -> str:
        """Return the shell command the model proposes for request."""
        prompt = render(self._template(GENERATE_TEMPLATE), {"UserInput": request, "Shell": shell})
        log.debug("generation prompt: %s", prompt)
        reply = self._ask(prompt, "Generating command...")
        return extract_command(reply)

    def explain(self, command: str) -> str:
        """Return the model's explanation of command."""
        prompt = render(self._template(EXPLAIN_TEMPLATE), {"Command": command})
        log.debug("explanation prompt: %s", prompt)
        reply = self._ask(prompt, "Explaining command...")
        return extract_tagged(reply)

    def run(self, request: str, options: CommandOptions | None = None) -> GenerationResult:
        """Generate a command and, if requested, its explanation.

        A failure while explaining is recorded on the result rather than
        raised, so the extracted command is never lost.
        """
        options = options or CommandOptions()
        result = GenerationResult(command=self.generate(request, options.shell))
        if not options.explain:
            return result
        try:
            result.explanation = self.explain(result.command)
        except ScriptgenError as e:
            log.debug("explanation failed: %s", e)
            result.explanation_error = e
        return result
