"""Tests for the build pipeline, build sequencing and watch mode."""

from __future__ import annotations

import shutil
import threading
from pathlib import Path

import pytest

from tailforge.build import (
    BuildResult,
    BuildSequence,
    Builder,
    PollingObserver,
    Watcher,
    build_once,
    write_stylesheet,
)
from tailforge.config import BuildConfig, load_config
from tailforge.errors import GlobResolutionError, InvalidTokenError, ScanCancelled
from tailforge.events import BuildCancelled, BuildStarted, EventBus
from tailforge.scanner import CandidateStore

FIXTURES = Path(__file__).parent.parent / "fixtures"


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def spacing_config(**kwargs) -> BuildConfig:
    defaults = dict(
        content_patterns=("*.html",),
        theme={"spacing": {"4": "1rem"}},
        preflight=False,
    )
    defaults.update(kwargs)
    return BuildConfig(**defaults)


# ---------------------------------------------------------------------------
# BuildSequence
# ---------------------------------------------------------------------------


class TestBuildSequence:
    def test_monotonic(self) -> None:
        sequence = BuildSequence()
        assert [sequence.next() for _ in range(3)] == [1, 2, 3]
        assert sequence.current == 3

    def test_threads_get_distinct_numbers(self) -> None:
        sequence = BuildSequence()
        taken: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(100):
                n = sequence.next()
                with lock:
                    taken.append(n)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert sorted(taken) == list(range(1, 801))


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class TestBuilder:
    def test_spacing_scenario(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", '<div class="p-4 m-99"></div>')
        result = Builder(spacing_config(), tmp_path).build()
        assert result.class_names == ["p-4"]
        assert ".p-4{padding:1rem}" in result.css
        assert ".m-" not in result.css
        assert result.sequence == 1

    def test_safelist_without_content_match(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", '<div class="p-4"></div>')
        config = spacing_config(
            theme={"colors": {"dynamic": {"red": "#f00", "green": "#0f0"}}},
            safelist=("bg-dynamic-*",),
        )
        result = Builder(config, tmp_path).build()
        assert {"bg-dynamic-red", "bg-dynamic-green"} <= set(result.class_names)
        assert ".bg-dynamic-red{background-color:#f00}" in result.css

    def test_fixture_project(self, tmp_path: Path) -> None:
        shutil.copytree(FIXTURES, tmp_path / "site")
        root = tmp_path / "site"
        result = Builder(load_config(root / "tailforge.json"), root).build()
        css = result.css

        assert css.startswith("/* base */\n")
        assert "html{line-height:1.5;-webkit-text-size-adjust:100%;tab-size:4;font-family:Inter,system-ui,sans-serif}" in css
        assert ".bg-brand-500{background-color:#3b82f6}" in css
        assert ".dark .dark\\:bg-slate-900{background-color:#0f172a}" in css
        assert ".rounded-xl{border-radius:1rem}" in css
        assert ".w-\\[32rem\\]{width:32rem}" in css
        assert ".\\!m-2{margin:0.5rem !important}" in css
        assert "@keyframes spin{to{transform:rotate(360deg)}}" in css
        assert ".animate-spin-slow{animation:spin 3s linear infinite}" in css
        assert ".space-y-4 > :not([hidden]) ~ :not([hidden]){margin-top:1rem}" in css
        assert "@media (min-width: 768px){\n.md\\:p-8{padding:2rem}\n}" in css
        assert ".hover\\:bg-brand-700:hover{background-color:#1d4ed8}" in css

        rules = {d.rule for d in result.warnings}
        assert "unknown_variant" in rules
        assert "unmatched_pattern" in rules

    def test_dashboard_vocabulary_retained(self, tmp_path: Path) -> None:
        shutil.copytree(FIXTURES / "dashboard", tmp_path / "dashboard")
        config = BuildConfig(content_patterns=("./dashboard/*.rs",), preflight=False)
        result = Builder(config, tmp_path).build()
        expected = {
            "min-h-screen", "bg-gray-50", "flex", "items-center", "justify-between",
            "px-4", "py-2", "bg-gray-900", "text-white", "shadow-lg", "text-2xl",
            "font-bold", "space-x-4", "font-mono", "text-sm", "relative",
            "inline-block", "text-left", "mt-4", "px-3", "py-1", "rounded", "border",
            "cursor-pointer", "bg-white", "hover:bg-gray-100", "absolute", "mt-1",
            "w-full", "max-h-48", "overflow-y-auto", "p-2", "text-center", "p-4",
            "space-y-2", "mt-2", "bg-blue-500", "hover:bg-blue-600", "bg-green-500",
            "hover:bg-green-600", "bg-[#353535]", "text-gray-300", "rounded-lg", "p-6",
            "max-w-md", "w-[90%]", "shadow-xl", "bg-[#4a4a4a]", "border-[#666]",
            "px-2", "py-0.5", "min-w-[1.5rem]",
        }
        assert expected <= set(result.class_names)
        assert ".border-\\[\\#666\\]{border-color:#666}" in result.css
        assert ".overflow-y-auto{overflow-y:auto}" in result.css

    def test_output_is_byte_stable(self, tmp_path: Path) -> None:
        write(tmp_path / "a.html", 'class="p-4 md:p-4 hover:p-4 !p-4 w-[3px]"')
        first = Builder(spacing_config(), tmp_path).build().css
        second = Builder(spacing_config(), tmp_path).build().css
        assert first == second

    def test_brace_content_pattern(self, tmp_path: Path) -> None:
        write(tmp_path / "src" / "app.rs", 'view! { <div class="p-4"></div> }')
        write(tmp_path / "src" / "pages" / "home.html", '<p class="m-4"></p>')
        config = spacing_config(content_patterns=("./src/**/*.{rs,html}",))
        result = Builder(config, tmp_path).build()
        assert result.class_names == ["m-4", "p-4"]
        assert result.warnings == ()

    def test_no_matching_files_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(GlobResolutionError) as info:
            Builder(spacing_config(content_patterns=("src/**/*.rs",)), tmp_path).build()
        assert info.value.patterns == ("src/**/*.rs",)

    def test_no_matching_files_with_safelist_is_warning(self, tmp_path: Path) -> None:
        config = spacing_config(content_patterns=("src/**/*.rs",), safelist=("p-4",))
        result = Builder(config, tmp_path).build()
        assert result.class_names == ["p-4"]
        assert [d.rule for d in result.warnings] == ["unmatched_pattern"]
        assert result.warnings[0].fix == f"Patterns resolve against {tmp_path.resolve()}; correct or remove 'src/**/*.rs'"

    def test_invalid_theme_is_fatal(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", 'class="p-4"')
        config = spacing_config(theme={"extend": {"colors": {"brand": "#nothex"}}})
        with pytest.raises(InvalidTokenError) as info:
            Builder(config, tmp_path).build()
        assert info.value.token == "brand"

    def test_incremental_rebuild(self, tmp_path: Path) -> None:
        page = write(tmp_path / "index.html", 'class="p-4"')
        builder = Builder(spacing_config(), tmp_path)
        first = builder.build()
        write(page, 'class="m-4 mx-4"')
        second = builder.build(changed_paths=[page])
        assert first.class_names == ["p-4"]
        assert second.class_names == ["m-4", "mx-4"]
        assert second.sequence == 2

    def test_new_file_in_incremental_rebuild(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", 'class="p-4"')
        builder = Builder(spacing_config(), tmp_path)
        builder.build()
        extra = write(tmp_path / "extra.html", 'class="gap-4"')
        result = builder.build(changed_paths=[extra])
        assert result.class_names == ["gap-4", "p-4"]

    def test_prepare_cached_by_theme(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", 'class="p-4"')
        builder = Builder(spacing_config(), tmp_path)
        assert builder.prepare() is builder.prepare()

    def test_shared_store(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", 'class="p-4"')
        store = CandidateStore.init_empty()
        Builder(spacing_config(), tmp_path, store=store).build()
        assert "p-4" in store.snapshot()

    def test_cancelled_build(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", 'class="p-4"')
        bus = EventBus()
        cancelled: list[BuildCancelled] = []
        bus.subscribe(BuildCancelled, cancelled.append)
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(ScanCancelled):
            Builder(spacing_config(), tmp_path, event_bus=bus).build(cancel=cancel)
        assert [c.sequence for c in cancelled] == [1]

    def test_build_once(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", 'class="p-4"')
        assert build_once(spacing_config(), tmp_path).class_names == ["p-4"]

    def test_preflight_included(self, tmp_path: Path) -> None:
        write(tmp_path / "index.html", 'class="p-4"')
        result = Builder(spacing_config(preflight=True), tmp_path).build()
        assert result.css.startswith("/* base */\n*,::before,::after{")
        assert result.class_names == ["p-4"]


# ---------------------------------------------------------------------------
# write_stylesheet
# ---------------------------------------------------------------------------


class TestWriteStylesheet:
    def test_writes_and_skips_unchanged(self, tmp_path: Path) -> None:
        out = tmp_path / "dist" / "output.css"
        assert write_stylesheet(out, ".p-4{padding:1rem}\n")
        assert out.read_text(encoding="utf-8") == ".p-4{padding:1rem}\n"
        assert not write_stylesheet(out, ".p-4{padding:1rem}\n")
        assert write_stylesheet(out, "")
        assert out.read_text(encoding="utf-8") == ""
        assert [p.name for p in out.parent.iterdir()] == ["output.css"]


# ---------------------------------------------------------------------------
# Watcher
# ---------------------------------------------------------------------------


class FakeBuilder:
    """Builder stand-in whose first build is superseded after its scan finished."""

    def __init__(self) -> None:
        self.sequence = BuildSequence()
        self.calls: list[set[Path]] = []
        self.watcher: Watcher | None = None

    def build(self, changed_paths=None, cancel=None) -> BuildResult:
        number = self.sequence.next()
        self.calls.append(set(changed_paths or ()))
        if number == 1 and self.watcher is not None:
            self.watcher.notify([Path("late.html")])
        return BuildResult(
            sequence=number, css=f"/* {number} */\n", retained=frozenset(), candidates=frozenset()
        )


class TestWatcher:
    def test_rapid_notifications_emit_once_with_union(self, tmp_path: Path) -> None:
        a = write(tmp_path / "a.html", 'class="p-4"')
        b = write(tmp_path / "b.html", "")
        bus = EventBus()
        builder = Builder(spacing_config(), tmp_path, event_bus=bus)
        emitted: list[BuildResult] = []
        watcher = Watcher(builder, emitted.append, debounce=0.01)

        def second_change(event: BuildStarted) -> None:
            if event.sequence == 1:
                write(b, 'class="m-4"')
                watcher.notify([b])

        bus.subscribe(BuildStarted, second_change)
        watcher.start()
        try:
            watcher.notify([a])
            assert watcher.wait_idle(timeout=10)
        finally:
            watcher.stop(timeout=5)

        assert len(emitted) == 1
        assert emitted[0].sequence == 2
        assert emitted[0].class_names == ["m-4", "p-4"]
        assert watcher.last_emitted == 2

    def test_debounce_collapses_notifications(self, tmp_path: Path) -> None:
        write(tmp_path / "a.html", 'class="p-4"')
        builder = Builder(spacing_config(), tmp_path)
        emitted: list[BuildResult] = []
        watcher = Watcher(builder, emitted.append, debounce=0.2)
        watcher.start()
        try:
            for name in ("a.html", "b.html", "c.html"):
                watcher.notify([tmp_path / name])
            assert watcher.wait_idle(timeout=10)
        finally:
            watcher.stop(timeout=5)
        assert [r.sequence for r in emitted] == [1]

    def test_result_superseded_after_scan_is_discarded(self) -> None:
        builder = FakeBuilder()
        emitted: list[BuildResult] = []
        watcher = Watcher(builder, emitted.append, debounce=0.01)  # type: ignore[arg-type]
        builder.watcher = watcher
        watcher.start()
        try:
            watcher.notify([Path("first.html")])
            assert watcher.wait_idle(timeout=10)
        finally:
            watcher.stop(timeout=5)
        assert [r.sequence for r in emitted] == [2]
        assert builder.calls == [{Path("first.html")}, {Path("late.html")}]

    def test_failed_rebuild_keeps_watching(self, tmp_path: Path) -> None:
        builder = Builder(spacing_config(content_patterns=("*.html",)), tmp_path)
        emitted: list[BuildResult] = []
        watcher = Watcher(builder, emitted.append, debounce=0.01)
        watcher.start()
        try:
            watcher.notify([tmp_path / "a.html"])
            assert watcher.wait_idle(timeout=10)
            assert emitted == []
            page = write(tmp_path / "a.html", 'class="p-4"')
            watcher.notify([page])
            assert watcher.wait_idle(timeout=10)
        finally:
            watcher.stop(timeout=5)
        assert len(emitted) == 1
        assert emitted[0].class_names == ["p-4"]

    def test_emit_failure_keeps_watching(self, tmp_path: Path) -> None:
        page = write(tmp_path / "a.html", 'class="p-4"')
        builder = Builder(spacing_config(), tmp_path)
        emitted: list[BuildResult] = []

        def on_emit(result: BuildResult) -> None:
            if result.sequence == 1:
                raise OSError("disk full")
            emitted.append(result)

        watcher = Watcher(builder, on_emit, debounce=0.01)
        watcher.start()
        try:
            watcher.notify([page])
            assert watcher.wait_idle(timeout=10)
            write(page, 'class="m-4"')
            watcher.notify([page])
            assert watcher.wait_idle(timeout=10)
        finally:
            watcher.stop(timeout=5)
        assert [r.sequence for r in emitted] == [2]
        assert emitted[0].class_names == ["m-4"]


class TestPollingObserver:
    def test_detects_add_modify_delete(self, tmp_path: Path) -> None:
        page = write(tmp_path / "a.html", "one")
        seen: list[set[Path]] = []
        observer = PollingObserver(tmp_path, ["*.html"], seen.append)

        assert observer.poll() == set()
        added = write(tmp_path / "b.html", "two")
        assert observer.poll() == {added.resolve()}
        write(page, "one more")
        assert observer.poll() == {page.resolve()}
        added.unlink()
        assert observer.poll() == {added.resolve()}
        assert len(seen) == 3

    def test_ignores_unmatched_files(self, tmp_path: Path) -> None:
        observer = PollingObserver(tmp_path, ["*.html"], lambda changed: None)
        write(tmp_path / "notes.txt", "x")
        assert observer.poll() == set()

    def test_brace_pattern(self, tmp_path: Path) -> None:
        write(tmp_path / "src" / "app.rs", "one")
        observer = PollingObserver(tmp_path, ["./src/**/*.{rs,html}"], lambda changed: None)
        page = write(tmp_path / "src" / "pages" / "home.html", "two")
        write(tmp_path / "src" / "notes.txt", "x")
        assert observer.poll() == {page.resolve()}
