"""
Zero Gravity Lesson - Tkinter (screen-based) desktop lesson

Flow:
1. Welcome screen: Mission Control briefing, one line per "Next" click.
2. Lesson screen: what microgravity is, with a button to the quiz and the chat.
3. Quiz screen: three multiple-choice questions, one at a time.
4. Result screen: score, medal, save progress or exit.
5. Chat screen: ask the astronaut avatar anything (keyword answers, Wikipedia fallback).

Setup (from repo root):

    python -m venv .venv
    source .venv/bin/activate   # or .venv\\Scripts\\activate on Windows
    pip install -e .

Optional images (cursor, avatar, medals, quiz picture) are looked up in the
working directory, see zerogravity/assets.py. Then run:

    python main.py
"""

import threading
import tkinter as tk
from tkinter import ttk
from typing import Dict, List, Optional, Tuple

from PIL import ImageTk

from zerogravity.assets import AVATAR_IMAGE, QUIZ_IMAGE, load_image, resolve_cursor
from zerogravity.chat import ChatRouter, ChatTranscript
from zerogravity.config import AppConfig, load_config
from zerogravity.content import (
    CHAT_PLACEHOLDER,
    DIALOGUE_SPEAKER,
    FEEDBACK_CORRECT,
    FEEDBACK_INCORRECT,
    LESSON_EXPLANATION,
    LESSON_EXPLANATION_TITLE,
    LESSON_FACTS,
    LESSON_FUN_FACT,
    LESSON_INTRO,
    LESSON_TITLE,
    QUIZ_BANK,
)
from zerogravity.logger import logger
from zerogravity.models import ChatTurn, Feedback, Speaker
from zerogravity.navigation import NavigationController, ScreenName
from zerogravity.progress import ProgressLog
from zerogravity.quiz import QuizRun
from zerogravity.results import medal_for
from zerogravity.starfield import FRAME_MS, MAX_TAIL_POINTS, Starfield, blend, star_color
from zerogravity.summary import WikiSummaryClient
from zerogravity.welcome import DialoguePacer

FONT = "Comic Sans MS"
BG = "#000000"
PANEL_BG = "#1e2e50"
TEXT_FG = "#ffffff"
ACCENT = "#2d88ff"
GOLD = "#ffe257"


def make_photo(image_path, size: Optional[Tuple[int, int]] = None,
               fit: bool = False) -> Optional[ImageTk.PhotoImage]:
    """Load an asset as a Tk photo, or None if it is missing."""
    image = load_image(image_path, size, fit=fit)
    if image is None:
        return None
    return ImageTk.PhotoImage(image)


# ---------------------------------------------------------------------------
# Starfield background (composed into every screen)
# ---------------------------------------------------------------------------

class StarfieldCanvas(tk.Canvas):
    """
    Black canvas with twinkling stars and comets.

    All canvas items are created up front; each frame only moves and
    recolors them. The FRAME_MS timer runs between start() and stop(),
    which the owning screen calls from mount()/unmount(). Missed frames are
    simply skipped.
    """

    def __init__(self, parent, star_count: int = 90, comet_count: int = 2,
                 width: int = 1000, height: int = 700) -> None:
        super().__init__(parent, background=BG, highlightthickness=0, width=width, height=height)
        self.model = Starfield(star_count, comet_count, width, height)
        self._star_items: List[int] = []
        self._comet_items: List[Tuple[List[int], int]] = []   # (tail dots, head) per comet slot
        self._after_id: Optional[str] = None

        self._create_items()
        self.bind("<Configure>", self._on_resize)
        self.bind("<Destroy>", self._on_destroy)

    @property
    def running(self) -> bool:
        return self._after_id is not None

    def start(self) -> None:
        if self._after_id is None:
            self._draw()
            self._after_id = self.after(FRAME_MS, self._animate)

    def stop(self) -> None:
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None

    def _create_items(self) -> None:
        self.delete("all")
        self._star_items = [
            self.create_oval(0, 0, 0, 0, outline="", tags="star") for _ in self.model.stars
        ]
        self._comet_items = []
        for _ in self.model.comets:
            tail = [
                self.create_oval(0, 0, 0, 0, outline="", state="hidden", tags="comet")
                for _ in range(MAX_TAIL_POINTS)
            ]
            head = self.create_oval(0, 0, 0, 0, outline="", fill=TEXT_FG, tags="comet")
            self._comet_items.append((tail, head))

    def _on_resize(self, event: tk.Event) -> None:
        self.model.resize(event.width, event.height)

    def _on_destroy(self, event: tk.Event) -> None:
        if event.widget is self:
            self.stop()

    def _animate(self) -> None:
        self.model.tick()
        self._draw()
        self._after_id = self.after(FRAME_MS, self._animate)

    def _draw(self) -> None:
        for item, star in zip(self._star_items, self.model.stars):
            x, y = round(star.x), round(star.y)
            self.coords(item, x, y, x + star.size, y + star.size)
            self.itemconfigure(item, fill=star_color(star))

        for (tail, head), comet in zip(self._comet_items, self.model.comets):
            points = self.model.tail_points(comet)
            for i, item in enumerate(tail):
                if i < len(points) and points[i][2] > 0:
                    x, y, alpha = points[i]
                    self.coords(item, x, y, x + 6, y + 6)
                    self.itemconfigure(item, fill=blend(comet.color, alpha / 255), state="normal")
                else:
                    self.itemconfigure(item, state="hidden")
            self.coords(head, comet.x - 2, comet.y - 2, comet.x + 7, comet.y + 7)


# ---------------------------------------------------------------------------
# Small widgets
# ---------------------------------------------------------------------------

class LoadingSpinner(ttk.Frame):
    """A simple animated loading spinner widget for Tkinter."""

    def __init__(self, parent, text: str = "Loading...") -> None:
        super().__init__(parent, style="Panel.TFrame")

        self.text = text
        self.spinner_chars = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
        self.spinner_index = 0
        self.is_running = False
        self._after_id = None

        self.label = ttk.Label(
            self,
            text=f"{self.spinner_chars[0]} {text}",
            style="Panel.TLabel",
            foreground="#7bb3ff",
        )
        self.label.pack()

    def start(self) -> None:
        if self.is_running:
            return
        self.is_running = True
        self.pack(side="left", padx=10)
        self._animate()

    def stop(self) -> None:
        self.is_running = False
        if self._after_id:
            self.after_cancel(self._after_id)
            self._after_id = None
        self.pack_forget()

    def _animate(self) -> None:
        if not self.is_running:
            return
        char = self.spinner_chars[self.spinner_index]
        self.label.configure(text=f"{char} {self.text}")
        self.spinner_index = (self.spinner_index + 1) % len(self.spinner_chars)
        self._after_id = self.after(100, self._animate)


class PlaceholderEntry(tk.Entry):
    """Entry showing grey placeholder text while empty and unfocused."""

    def __init__(self, parent, placeholder: str, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self.placeholder = placeholder
        self._normal_fg = kwargs.get("foreground", TEXT_FG)
        self._show_placeholder()
        self.bind("<FocusIn>", self._on_focus_in)
        self.bind("<FocusOut>", self._on_focus_out)

    def _show_placeholder(self) -> None:
        self.delete(0, "end")
        self.insert(0, self.placeholder)
        self.configure(foreground="gray")

    def _on_focus_in(self, event: tk.Event) -> None:
        if self.get() == self.placeholder:
            self.delete(0, "end")
            self.configure(foreground=self._normal_fg)

    def _on_focus_out(self, event: tk.Event) -> None:
        if not self.get():
            self._show_placeholder()


def make_button(parent, text: str, command, controller: NavigationController,
                style: str = "Accent.TButton") -> ttk.Button:
    return ttk.Button(parent, text=text, command=command, style=style, cursor=controller.cursor)


def make_back_button(parent, controller: NavigationController, target: ScreenName) -> ttk.Button:
    """'⬅ Back' button that navigates to `target`."""
    return make_button(parent, "⬅ Back", lambda: controller.show_screen(target), controller,
                       style="Back.TButton")


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------

class BaseScreen(ttk.Frame):
    """A full-window screen with a starfield behind its content panel."""

    STARS = 90
    COMETS = 2

    def __init__(self, parent, controller: NavigationController, config: AppConfig) -> None:
        super().__init__(parent)
        self.controller = controller
        self.config_ = config

        self.background = StarfieldCanvas(self, star_count=self.STARS, comet_count=self.COMETS)
        self.background.place(relx=0, rely=0, relwidth=1, relheight=1)

        self.top_bar = ttk.Frame(self, style="Space.TFrame")
        self.top_bar.place(x=10, y=10)

    def mount(self) -> None:
        self.tkraise()
        # Hidden screens stay mapped under tkraise, so only the mounted one animates
        self.background.start()

    def unmount(self) -> None:
        self.background.stop()


class WelcomeScreen(BaseScreen):
    def __init__(self, parent, controller: NavigationController, config: AppConfig) -> None:
        super().__init__(parent, controller, config)
        self.pacer = DialoguePacer(controller)

        self.avatar_photo = make_photo(config.asset(AVATAR_IMAGE), (150, 220))
        if self.avatar_photo is not None:
            avatar = ttk.Label(self, image=self.avatar_photo, style="Space.TLabel", cursor=controller.cursor)
            avatar.place(x=40, y=70)

        bubble = ttk.Frame(self, style="Panel.TFrame", padding=(24, 14))
        bubble.place(x=200, y=60, width=760, height=200)
        ttk.Label(bubble, text=DIALOGUE_SPEAKER, style="PanelTitle.TLabel").pack(anchor="w")
        self.dialogue_label = ttk.Label(bubble, text="", style="Panel.TLabel", wraplength=700, justify="left")
        self.dialogue_label.pack(anchor="w", pady=(6, 0))

        self.next_button = make_button(self, "", self._on_next, controller, style="Big.TButton")
        self.next_button.place(relx=0.5, y=320, anchor="n")

    def mount(self) -> None:
        # Coming back to the welcome screen restarts the briefing
        self.pacer.reset()
        self._render()
        super().mount()

    def _render(self) -> None:
        self.dialogue_label.configure(text=self.pacer.current_line)
        self.next_button.configure(text=self.pacer.button_label)

    def _on_next(self) -> None:
        if self.pacer.advance() is not None:
            self._render()


class LessonScreen(BaseScreen):
    STARS = 100

    def __init__(self, parent, controller: NavigationController, config: AppConfig) -> None:
        super().__init__(parent, controller, config)

        make_back_button(self.top_bar, controller, ScreenName.WELCOME).pack(side="left", padx=(0, 8))
        make_button(self.top_bar, "💬 Chat with Avatar",
                    lambda: controller.show_screen(ScreenName.CHAT), controller).pack(side="left")

        panel = ttk.Frame(self, style="Panel.TFrame", padding=32)
        panel.place(relx=0.5, y=70, anchor="n", width=760)

        ttk.Label(panel, text=LESSON_TITLE, style="LessonTitle.TLabel").pack(anchor="w", pady=(0, 16))
        ttk.Label(panel, text=LESSON_INTRO, style="Panel.TLabel", wraplength=690,
                  justify="left").pack(anchor="w", pady=(0, 12))
        ttk.Label(panel, text=LESSON_EXPLANATION_TITLE, style="PanelTitle.TLabel").pack(anchor="w")
        ttk.Label(panel, text=LESSON_EXPLANATION, style="Panel.TLabel", wraplength=690,
                  justify="left").pack(anchor="w", pady=(0, 12))
        facts = "\n".join(f"•  {fact}" for fact in LESSON_FACTS)
        ttk.Label(panel, text=facts, style="Panel.TLabel", wraplength=690, justify="left").pack(anchor="w")
        ttk.Label(panel, text=LESSON_FUN_FACT, style="Panel.TLabel", wraplength=690,
                  justify="left").pack(anchor="w", pady=(12, 24))

        make_button(panel, "Take Quiz", lambda: controller.show_screen(ScreenName.QUIZ),
                    controller, style="Big.TButton").pack(anchor="w")


class QuizScreen(BaseScreen):
    STARS = 80
    COMETS = 8

    def __init__(self, parent, controller: NavigationController, config: AppConfig) -> None:
        super().__init__(parent, controller, config)
        self.run: Optional[QuizRun] = None

        make_back_button(self.top_bar, controller, ScreenName.LESSON).pack(side="left")

        card = ttk.Frame(self, style="Panel.TFrame", padding=(30, 16))
        card.place(relx=0.5, y=60, anchor="n", width=620)

        self.quiz_photo = make_photo(config.asset(QUIZ_IMAGE), (350, 200), fit=True)
        if self.quiz_photo is not None:
            ttk.Label(card, image=self.quiz_photo, style="Panel.TLabel").pack(pady=(0, 14))

        self.progress_label = ttk.Label(card, text="", style="Progress.TLabel")
        self.progress_label.pack()
        self.question_label = ttk.Label(card, text="", style="Question.TLabel", wraplength=560,
                                        justify="center", anchor="center")
        self.question_label.pack(pady=(10, 8))

        self.option_buttons: List[ttk.Button] = []
        for i in range(4):
            btn = make_button(card, "", lambda idx=i: self._on_option(idx), controller, style="Option.TButton")
            btn.pack(fill="x", pady=4)
            self.option_buttons.append(btn)

        self.feedback_label = ttk.Label(card, text=" ", style="Feedback.TLabel", anchor="center")
        self.feedback_label.pack(pady=(14, 6))
        self.next_button = make_button(card, "Next", self._on_next, controller)

    def mount(self) -> None:
        # Every visit is a fresh run
        self.run = QuizRun(QUIZ_BANK, self.controller)
        super().mount()
        question = self.run.start()
        if question is not None:
            self._render()

    def unmount(self) -> None:
        self.run = None
        super().unmount()

    def _render(self) -> None:
        question = self.run.current_question
        self.progress_label.configure(text=self.run.position)
        self.question_label.configure(text=question.prompt)
        for btn, option in zip(self.option_buttons, question.options):
            btn.configure(text=option)
            btn.state(["!disabled"])
        self.feedback_label.configure(text=" ")
        self.next_button.pack_forget()

    def _on_option(self, index: int) -> None:
        if self.run is None:
            return
        feedback = self.run.select_option(index)
        if feedback is None:
            return
        for btn in self.option_buttons:
            btn.state(["disabled"])
        self.feedback_label.configure(
            text=FEEDBACK_CORRECT if feedback == Feedback.CORRECT else FEEDBACK_INCORRECT
        )
        self.next_button.configure(text="See Results" if self.run.is_last_question else "Next")
        self.next_button.pack(pady=(4, 0))

    def _on_next(self) -> None:
        if self.run is None:
            return
        if self.run.advance() is not None:
            self._render()


class ResultScreen(BaseScreen):
    STARS = 80

    def __init__(self, parent, controller: NavigationController, config: AppConfig) -> None:
        super().__init__(parent, controller, config)
        self._photos: Dict[str, Optional[ImageTk.PhotoImage]] = {}

        make_back_button(self.top_bar, controller, ScreenName.QUIZ).pack(side="left")

        center = ttk.Frame(self, style="Panel.TFrame", padding=30)
        center.place(relx=0.5, rely=0.42, anchor="center")
        self.result_label = ttk.Label(center, text="", style="Result.TLabel", justify="center", anchor="center")
        self.result_label.pack()
        self.medal_label = ttk.Label(center, style="Panel.TLabel")
        self.medal_label.pack(pady=(16, 0))

        bottom = ttk.Frame(self, style="Space.TFrame")
        bottom.place(relx=0.5, rely=0.9, anchor="center")
        self.save_button = make_button(bottom, "💾 Save Progress", self._on_save, controller)
        self.save_button.pack(side="left", padx=8)
        make_button(bottom, "Exit", self._on_exit, controller, style="Back.TButton").pack(side="left", padx=8)
        self.status_label = ttk.Label(self, text="", style="Space.TLabel")
        self.status_label.place(relx=0.5, rely=0.96, anchor="center")

    def mount(self) -> None:
        self._update_result()
        super().mount()

    def _medal_photo(self, image: str) -> Optional[ImageTk.PhotoImage]:
        if image not in self._photos:
            self._photos[image] = make_photo(self.config_.asset(image), (130, 130))
        return self._photos[image]

    def _update_result(self) -> None:
        self.status_label.configure(text="")
        self.save_button.state(["!disabled"])
        if not self.controller.has_result:
            self.result_label.configure(text="Take the quiz to earn a medal!")
            self.medal_label.configure(image="")
            self.save_button.state(["disabled"])
            return

        medal = medal_for(self.controller.get_score(), len(QUIZ_BANK))
        logger.ui(f"Result: {medal.tier.value}")
        self.result_label.configure(text=medal.message)
        photo = self._medal_photo(medal.image)
        self.medal_label.configure(image=photo if photo is not None else "")

    def _on_save(self) -> None:
        score = self.controller.get_score()
        sink = self.controller.progress_sink()
        lesson_name = self.config_.lesson_name
        self.save_button.state(["disabled"])
        self.status_label.configure(text="Saving...")

        def save_threaded():
            logger.task_start("save_progress")
            saved = sink.append(lesson_name, score)
            try:
                self.after(0, lambda: self._on_saved(saved))
            except (tk.TclError, RuntimeError):
                logger.debug("Window closed before the save finished")

        threading.Thread(target=save_threaded, daemon=True).start()

    def _on_saved(self, saved: bool) -> None:
        self.status_label.configure(text="✓ Progress saved" if saved else "Could not save progress")
        if not saved:
            self.save_button.state(["!disabled"])

    def _on_exit(self) -> None:
        logger.ui("Exit requested")
        self.winfo_toplevel().destroy()


class ChatScreen(BaseScreen):
    STARS = 60

    def __init__(self, parent, controller: NavigationController, config: AppConfig,
                 summary_client: Optional[WikiSummaryClient] = None) -> None:
        super().__init__(parent, controller, config)
        summary_client = summary_client or WikiSummaryClient(config)

        make_back_button(self.top_bar, controller, ScreenName.LESSON).pack(side="left")

        self.avatar_photo = make_photo(config.asset(AVATAR_IMAGE), (95, 140))
        if self.avatar_photo is not None:
            ttk.Label(self, image=self.avatar_photo, style="Space.TLabel").place(relx=0.5, y=20, anchor="n")

        chat_box = ttk.Frame(self, style="Panel.TFrame", padding=1)
        chat_box.place(relx=0.5, rely=0.58, anchor="center", width=600, height=350)

        text_frame = ttk.Frame(chat_box, style="Panel.TFrame")
        text_frame.pack(fill="both", expand=True)
        self.chat_area = tk.Text(
            text_frame, wrap="word", background="#1e1e1e", foreground=TEXT_FG,
            font=(FONT, 14), relief="flat", padx=8, pady=8, state="disabled",
        )
        scrollbar = ttk.Scrollbar(text_frame, orient="vertical", command=self.chat_area.yview)
        self.chat_area.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        self.chat_area.pack(side="left", fill="both", expand=True)

        input_row = ttk.Frame(chat_box, style="Panel.TFrame")
        input_row.pack(fill="x")
        self.input_field = PlaceholderEntry(
            input_row, CHAT_PLACEHOLDER, font=(FONT, 14), background="#323232",
            foreground=TEXT_FG, insertbackground=TEXT_FG, relief="flat",
        )
        self.input_field.pack(side="left", fill="x", expand=True, ipady=8)
        self.input_field.bind("<Return>", lambda e: self._on_submit())
        self.spinner = LoadingSpinner(input_row, text="Thinking...")

        self.transcript = ChatTranscript()
        self.transcript.subscribe(self._append_turn)
        self.router = ChatRouter(
            self.transcript,
            summary_client.fetch_summary,
            post=self._post_to_ui,
            on_busy_changed=self._on_busy_changed,
        )
        self.bind("<Destroy>", self._on_destroy)
        self.router.greet()

    def _post_to_ui(self, callback) -> None:
        """Run `callback` on the Tk loop; called from worker threads."""
        try:
            self.after(0, callback)
        except (tk.TclError, RuntimeError):
            logger.debug("Chat screen is gone, dropping reply")

    def unmount(self) -> None:
        self.router.cancel_pending()
        super().unmount()

    def _on_destroy(self, event: tk.Event) -> None:
        if event.widget is self:
            self.router.cancel_pending()

    def _on_submit(self) -> None:
        text = self.input_field.get()
        if self.router.ask(text) is not None:
            self.input_field.delete(0, "end")

    def _on_busy_changed(self, busy: bool) -> None:
        if busy:
            self.spinner.start()
        else:
            self.spinner.stop()

    def _append_turn(self, turn: ChatTurn) -> None:
        suffix = "\n\n" if turn.speaker == Speaker.AVATAR else "\n"
        self.chat_area.configure(state="normal")
        self.chat_area.insert("end", turn.render() + suffix)
        self.chat_area.see("end")
        self.chat_area.configure(state="disabled")


# ---------------------------------------------------------------------------
# Application window
# ---------------------------------------------------------------------------

SCREENS = (
    (ScreenName.WELCOME, WelcomeScreen),
    (ScreenName.LESSON, LessonScreen),
    (ScreenName.QUIZ, QuizScreen),
    (ScreenName.RESULT, ResultScreen),
    (ScreenName.CHAT, ChatScreen),
)


class ZeroGravityApp(tk.Tk):
    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        logger.ui("Initializing ZeroGravityApp window...")

        self.title("Zero Gravity Lesson")
        window_width = 1000
        window_height = 700
        center_x = int(self.winfo_screenwidth() / 2 - window_width / 2)
        center_y = int(self.winfo_screenheight() / 2 - window_height / 2)
        self.geometry(f"{window_width}x{window_height}+{center_x}+{center_y}")
        self.configure(bg=BG)
        self._configure_styles()

        cursor = resolve_cursor(config.asset_dir)
        try:
            self.configure(cursor=cursor)
        except tk.TclError as e:
            logger.warning(f"Cursor {cursor!r} rejected by Tk ({e}), using default")
            cursor = ""

        self.navigator = NavigationController(ProgressLog(config.progress_file), cursor)

        container = ttk.Frame(self)
        container.pack(fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        logger.ui("Creating screens...")
        self.screens = {}
        for name, ScreenClass in SCREENS:
            screen = ScreenClass(parent=container, controller=self.navigator, config=config)
            screen.grid(row=0, column=0, sticky="nsew")
            self.screens[name] = screen
            self.navigator.register(name, screen)

        logger.ui("Application initialized successfully")
        self.navigator.show_screen(ScreenName.WELCOME)

    def _configure_styles(self) -> None:
        style = ttk.Style()
        style.theme_use("clam")
        style.configure("TFrame", background=BG)
        style.configure("Space.TFrame", background=BG)
        style.configure("Space.TLabel", background=BG, foreground=TEXT_FG, font=(FONT, 14))
        style.configure("Panel.TFrame", background=PANEL_BG)
        style.configure("Panel.TLabel", background=PANEL_BG, foreground=TEXT_FG, font=(FONT, 17))
        style.configure("PanelTitle.TLabel", background=PANEL_BG, foreground=TEXT_FG, font=(FONT, 18, "bold"))
        style.configure("LessonTitle.TLabel", background=PANEL_BG, foreground=GOLD, font=(FONT, 30, "bold"))
        style.configure("Progress.TLabel", background=PANEL_BG, foreground="#ffe85d", font=(FONT, 16))
        style.configure("Question.TLabel", background=PANEL_BG, foreground=TEXT_FG, font=(FONT, 20, "bold"))
        style.configure("Feedback.TLabel", background=PANEL_BG, foreground="#ffff00", font=(FONT, 16, "bold"))
        style.configure("Result.TLabel", background=PANEL_BG, foreground="#f5de36", font=(FONT, 26, "bold"))
        style.configure("Accent.TButton", background=ACCENT, foreground=TEXT_FG, font=(FONT, 16, "bold"),
                        padding=(20, 6))
        style.map("Accent.TButton", background=[("active", "#3c9bff"), ("disabled", "#34506f")])
        style.configure("Big.TButton", background=ACCENT, foreground=TEXT_FG, font=(FONT, 20, "bold"),
                        padding=(34, 10))
        style.map("Big.TButton", background=[("active", "#3c9bff")])
        style.configure("Back.TButton", background="#3c3c3c", foreground="#ffff00", font=(FONT, 15, "bold"),
                        padding=(20, 6))
        style.map("Back.TButton", background=[("active", "#505050")])
        style.configure("Option.TButton", background="#23325a", foreground=TEXT_FG, font=(FONT, 15),
                        padding=(18, 10), bordercolor="#559dff")
        style.map("Option.TButton", background=[("active", "#2f4478"), ("disabled", "#1b2745")],
                  foreground=[("disabled", "#9aa8c8")])


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> int:
    config = load_config()
    logger.enabled = config.debug
    logger.banner("Zero Gravity Lesson - Starting Application")

    app = ZeroGravityApp(config)
    logger.success("Application window created, entering main loop")
    app.mainloop()
    logger.separator("Application Closed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
