"""Pane-based git UI controller.

Hosts git documents in split panes using prompt_toolkit and routes key
presses to the action dispatcher.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document as TextDocument
from prompt_toolkit.filters import Condition
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.layout import (
    ConditionalContainer,
    Dimension,
    DynamicContainer,
    HSplit,
    VSplit,
    Window,
)
from prompt_toolkit.layout.containers import AnyContainer
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.layout import Layout
from prompt_toolkit.lexers import Lexer
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from gitpane.adapters.git_cmd import GitCommandRunner
from gitpane.core.dispatcher import ActionDispatcher
from gitpane.core.documents import CommitEditorDocument, Document
from gitpane.core.documents.base import DiffStyledMixin
from gitpane.core.presentation import DIFF_STYLE_CLASSES, GitpaneColors
from gitpane.domain.config import GitpaneConfig
from gitpane.domain.entities import DocumentKind, JobResult
from gitpane.ports.host import Job, JobCallback, SplitDirection
from gitpane.ports.vcs import VCS

logger = logging.getLogger(__name__)

VIEW_HINTS = "tab:next pane  \\q:close  R:refresh  ::command  c-c:quit"
EDITOR_HINTS = "c-s:commit  c-x:abandon  tab:next pane"


class DiffLexer(Lexer):
    """Colors each pane line by the style its document assigns to that row."""

    def __init__(self, source: DiffStyledMixin) -> None:
        self.source = source

    def lex_document(self, document: TextDocument) -> Callable[[int], list[tuple[str, str]]]:
        lines = document.lines

        def get_line(lineno: int) -> list[tuple[str, str]]:
            try:
                line = lines[lineno]
            except IndexError:
                return []
            return [(DIFF_STYLE_CLASSES[self.source.style_at(lineno)], line)]

        return get_line


@dataclass
class Pane:
    """A document shown in the UI together with its text buffer."""

    document: Document
    buffer: Buffer
    window: Window
    split: SplitDirection


class GitPaneUI:
    """Interactive git UI using prompt_toolkit.

    Implements the Host protocol: documents open in split panes, the
    focused pane's cursor row feeds row lookups, and jobs run in the
    event loop's executor and complete on the loop.
    """

    def __init__(
        self,
        config: GitpaneConfig | None = None,
        runner_factory: Callable[[], VCS] | None = None,
        input: Input | None = None,
        output: Output | None = None,
    ):
        """Initialize the UI.

        Args:
            config: Gitpane configuration. Defaults to built-in defaults.
            runner_factory: Creates runners for top-level commands.
            input: prompt_toolkit input (tests pass a pipe input).
            output: prompt_toolkit output (tests pass a dummy output).
        """
        self.config = config or GitpaneConfig.default()
        if runner_factory is None:
            executable = self.config.git.executable

            def runner_factory() -> VCS:
                return GitCommandRunner(executable=executable)

        self.dispatcher = ActionDispatcher(
            host=self,
            runner_factory=runner_factory,
            log_limit=self.config.log.limit,
        )

        # Pane state
        self.panes: list[Pane] = []
        self.focused_index = 0

        # Message line state
        self.message = ""
        self.message_is_error = False
        self.command_mode = False

        self._build_ui(input, output)

    # Host protocol

    @property
    def active_document(self) -> Document | None:
        pane = self._focused_pane()
        return pane.document if pane else None

    def cursor_row(self) -> int:
        pane = self._focused_pane()
        return pane.buffer.document.cursor_position_row if pane else 0

    def open_document(self, document: Document, split: SplitDirection = "horizontal") -> None:
        buffer = Buffer(
            document=TextDocument(document.text, 0),
            read_only=document.readonly,
            multiline=True,
        )
        if not document.readonly:
            buffer.on_text_changed += self._on_editor_changed

        lexer = None
        if isinstance(document, DiffStyledMixin) and self.config.display.diff_highlighting:
            lexer = DiffLexer(document)

        window = Window(
            content=BufferControl(buffer=buffer, lexer=lexer, focusable=True),
            wrap_lines=False,
            cursorline=document.readonly,
        )
        self.panes.append(Pane(document=document, buffer=buffer, window=window, split=split))
        self._focus(len(self.panes) - 1)
        logger.debug("Opened %s", document.name)

    def close_document(self, document: Document) -> None:
        document.close()
        for index, pane in enumerate(self.panes):
            if pane.document is document:
                del self.panes[index]
                break
        else:
            return

        if not self.panes:
            if self.app.is_running:
                self.app.exit()
            return
        self._focus(min(self.focused_index, len(self.panes) - 1))

    def set_message(self, message: str, error: bool = False) -> None:
        self.message = message
        self.message_is_error = error
        self.app.invalidate()

    def run_job(self, job: Job, on_complete: JobCallback) -> None:
        if not self.app.is_running:
            self._complete_job(job(), on_complete)
            return

        async def run() -> None:
            loop = asyncio.get_running_loop()
            result = await loop.run_in_executor(None, job)
            self._complete_job(result, on_complete)

        self.app.create_background_task(run())

    def _complete_job(self, result: JobResult, on_complete: JobCallback) -> None:
        on_complete(result)
        self.sync_panes()
        self.app.invalidate()

    # Pane management

    def _focused_pane(self) -> Pane | None:
        if 0 <= self.focused_index < len(self.panes):
            return self.panes[self.focused_index]
        return None

    def _focus(self, index: int) -> None:
        self.focused_index = index
        pane = self._focused_pane()
        if pane is not None and not self.command_mode:
            self.app.layout.focus(pane.window)

    def focus_next(self) -> None:
        if self.panes:
            self._focus((self.focused_index + 1) % len(self.panes))

    def sync_panes(self) -> None:
        """Copy refreshed document lines into the read-only pane buffers."""
        for pane in self.panes:
            if not pane.document.readonly:
                continue
            text = pane.document.text
            if pane.buffer.text == text:
                continue
            row = pane.buffer.document.cursor_position_row
            new_document = TextDocument(text, 0)
            row = min(row, new_document.line_count - 1)
            position = new_document.translate_row_col_to_index(row, 0)
            pane.buffer.set_document(TextDocument(text, position), bypass_readonly=True)

    def _on_editor_changed(self, buffer: Buffer) -> None:
        for pane in self.panes:
            if pane.buffer is buffer and isinstance(pane.document, CommitEditorDocument):
                pane.document.set_lines(buffer.text.split("\n"))

    def _run_action(self, action: Callable[[], bool]) -> None:
        action()
        self.sync_panes()
        self.app.invalidate()

    # Layout

    def _build_ui(self, input: Input | None, output: Output | None) -> None:
        """Build the prompt_toolkit UI layout."""
        self.command_buffer = Buffer(
            multiline=False,
            accept_handler=self._accept_command,
        )

        kb = self._create_key_bindings()

        @Condition
        def command_visible() -> bool:
            return self.command_mode

        @Condition
        def help_visible() -> bool:
            return self.config.display.show_help

        message_window = Window(
            content=FormattedTextControl(self._get_message_text, focusable=False),
            height=Dimension.exact(1),
        )

        command_window = VSplit([
            Window(
                content=FormattedTextControl([("class:command", ":")]),
                width=Dimension.exact(1),
            ),
            Window(content=BufferControl(buffer=self.command_buffer), height=Dimension.exact(1)),
        ])

        help_window = Window(
            content=FormattedTextControl(self._get_help_text, focusable=False),
            height=Dimension.exact(1),
        )

        self.command_window = command_window

        main_container = HSplit([
            DynamicContainer(self._get_panes_container),
            Window(height=Dimension.exact(1), char="─", style="class:separator"),
            message_window,
            ConditionalContainer(command_window, filter=command_visible),
            ConditionalContainer(help_window, filter=help_visible),
        ])

        style = Style.from_dict(GitpaneColors.get_prompt_toolkit_style())

        self.app: Application[Any] = Application(
            layout=Layout(main_container),
            key_bindings=kb,
            style=style,
            full_screen=True,
            mouse_support=self.config.display.mouse_support,
            input=input,
            output=output,
        )

    def _get_panes_container(self) -> AnyContainer:
        if not self.panes:
            return Window(
                content=FormattedTextControl([("class:dimmed", "No open documents")]),
            )

        container: AnyContainer = self._pane_container(0)
        for index in range(1, len(self.panes)):
            pane_container = self._pane_container(index)
            if self.panes[index].split == "vertical":
                container = VSplit([
                    container,
                    Window(width=Dimension.exact(1), char="│", style="class:separator"),
                    pane_container,
                ])
            else:
                container = HSplit([container, pane_container])
        return container

    def _pane_container(self, index: int) -> AnyContainer:
        pane = self.panes[index]
        focused = index == self.focused_index

        def title() -> list[tuple[str, str]]:
            marker = " [+]" if pane.document.modified else ""
            style = "class:title.focused" if focused else "class:title"
            return [(style, f" {pane.document.name}{marker} ")]

        return HSplit([
            Window(content=FormattedTextControl(title), height=Dimension.exact(1)),
            pane.window,
        ])

    def _get_message_text(self) -> list[tuple[str, str]]:
        style = "class:message.error" if self.message_is_error else "class:message"
        return [(style, self.message)]

    def _get_help_text(self) -> list[tuple[str, str]]:
        document = self.active_document
        if document is not None and document.kind is DocumentKind.COMMIT_EDITOR:
            return [("class:dimmed", EDITOR_HINTS)]
        return [("class:dimmed", VIEW_HINTS)]

    # Command line

    def open_command_line(self) -> None:
        self.command_mode = True
        self.command_buffer.reset()
        self.app.layout.focus(self.command_buffer)

    def close_command_line(self) -> None:
        self.command_mode = False
        pane = self._focused_pane()
        if pane is not None:
            self.app.layout.focus(pane.window)

    def _accept_command(self, buffer: Buffer) -> bool:
        text = buffer.text.strip()
        self.close_command_line()
        self.run_command(text)
        return False

    def run_command(self, text: str) -> None:
        """Run a command line entry.

        "q" closes the focused pane. Anything else goes to the git entry
        command (a leading "Git" is optional).
        """
        parts = text.split()
        if parts and parts[0] in ("Git", "git"):
            parts = parts[1:]

        if parts in (["q"], ["quit"]):
            self._run_action(self.dispatcher.quit)
        else:
            self.dispatcher.execute(parts)
            self.sync_panes()
            self.app.invalidate()

    # Key bindings

    def _create_key_bindings(self) -> KeyBindings:
        """Create key bindings for the UI.

        Returns:
            KeyBindings object.
        """
        kb = KeyBindings()

        @Condition
        def viewing() -> bool:
            document = self.active_document
            return not self.command_mode and document is not None and document.readonly

        @Condition
        def editing() -> bool:
            document = self.active_document
            return (
                not self.command_mode
                and document is not None
                and document.kind is DocumentKind.COMMIT_EDITOR
            )

        @Condition
        def in_command_line() -> bool:
            return self.command_mode

        # Status actions
        @kb.add("s", filter=viewing)
        def stage(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.stage)

        @kb.add("u", filter=viewing)
        def unstage(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.unstage)

        @kb.add("-", filter=viewing)
        def toggle(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.toggle)

        @kb.add("\\", "d", filter=viewing)
        def diff(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.show_diff)

        @kb.add("\\", "c", filter=viewing)
        def commit(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.open_commit_editor)

        @kb.add("R", filter=viewing)
        def refresh(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.refresh)

        # Log and blame actions
        @kb.add("\\", "r", filter=viewing)
        @kb.add("enter", filter=viewing)
        def show_commit(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.show_commit)

        @kb.add("\\", "q", filter=viewing)
        def quit_pane(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.quit)

        # Navigation
        @kb.add("j", filter=viewing)
        def down(event: KeyPressEvent) -> None:
            event.current_buffer.cursor_down()

        @kb.add("k", filter=viewing)
        def up(event: KeyPressEvent) -> None:
            event.current_buffer.cursor_up()

        @kb.add("tab", filter=~in_command_line)
        def next_pane(event: KeyPressEvent) -> None:
            self.focus_next()

        @kb.add(":", filter=viewing)
        def command_line(event: KeyPressEvent) -> None:
            self.open_command_line()

        @kb.add("escape", filter=in_command_line)
        def cancel_command(event: KeyPressEvent) -> None:
            self.close_command_line()

        # Commit editor
        @kb.add("c-s", filter=editing)
        def save(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.save)

        @kb.add("c-x", filter=editing)
        def abandon(event: KeyPressEvent) -> None:
            self._run_action(self.dispatcher.quit)

        # Exit
        @kb.add("c-c")
        def exit_app(event: KeyPressEvent) -> None:
            event.app.exit()

        return kb

    async def run_async(self) -> None:
        """Run the UI asynchronously."""
        pane = self._focused_pane()
        if pane is not None:
            self.app.layout.focus(pane.window)
        await self.app.run_async()

    def run(self) -> None:
        """Run the UI.

        Suppresses all logging output during TUI execution to prevent display
        corruption, then restores original logging state after exit.
        """
        # prompt_toolkit runs in full-screen mode, so any stderr output
        # (including logging) will corrupt the UI
        logging.disable(logging.CRITICAL)
        try:
            asyncio.run(self.run_async())
        finally:
            logging.disable(logging.NOTSET)
