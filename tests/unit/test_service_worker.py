"""Tests for the service-worker build step."""

import os
import re
import subprocess
from unittest.mock import patch

import pytest

from singularity.service_worker import (
    BuildError,
    CachingStrategy,
    GenerateSWOptions,
    build_sw,
    generate_sw,
)
from singularity.service_worker.build import main, render_script
from singularity.service_worker.js import JsRegex, to_js_literal
from singularity.service_worker.rules import RUNTIME_CACHING

RUN = "singularity.service_worker.build.subprocess.run"


def completed(returncode: int = 0, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess(args=["node"], returncode=returncode, stdout=stdout, stderr=stderr)


def matches(rule, url: str) -> bool:
    return re.search(rule.url_pattern, url) is not None


class TestGenerateSWOptions:
    def setup_method(self) -> None:
        self.options = GenerateSWOptions.for_directory("resources/public").to_workbox()

    def test_precaches_output_directory(self) -> None:
        assert self.options["globDirectory"] == "resources/public"
        assert self.options["globPatterns"] == ["**/*"]
        assert self.options["globIgnores"] == ["js/cljs-runtime/**/*"]

    def test_writes_worker_into_directory(self) -> None:
        assert self.options["swDest"] == "resources/public/service-worker.js"

    def test_limits_and_fallback(self) -> None:
        assert self.options["maximumFileSizeToCacheInBytes"] == 41943040
        assert self.options["cleanupOutdatedCaches"] is True
        assert self.options["navigateFallback"] == "/index.html"

    def test_runtime_caching_rules_in_order(self) -> None:
        rules = self.options["runtimeCaching"]

        assert [r["handler"] for r in rules] == [
            "StaleWhileRevalidate",
            "CacheFirst",
            "StaleWhileRevalidate",
        ]
        assert [r["options"]["cacheName"] for r in rules] == [
            "hyperworker-google-fonts-stylesheets",
            "hyperworker-google-fonts-webfonts",
            "hyperworker-images",
        ]

    def test_webfont_rule_options(self) -> None:
        webfonts = self.options["runtimeCaching"][1]["options"]

        assert webfonts["cacheableResponse"] == {"statuses": [0, 200]}
        assert webfonts["expiration"] == {"maxEntries": 30, "maxAgeSeconds": 31536000}

    def test_image_rule_options(self) -> None:
        images = self.options["runtimeCaching"][2]["options"]

        assert images["expiration"] == {"maxEntries": 10}
        assert "cacheableResponse" not in images

    def test_stylesheet_rule_has_no_expiration(self) -> None:
        assert self.options["runtimeCaching"][0]["options"] == {
            "cacheName": "hyperworker-google-fonts-stylesheets"
        }


class TestRuntimeCachingRules:
    def test_stylesheet_rule_matches_google_fonts_css(self) -> None:
        stylesheets = RUNTIME_CACHING[0]
        assert matches(stylesheets, "https://fonts.googleapis.com/css?family=Roboto")
        assert not matches(stylesheets, "https://fonts.gstatic.com/s/roboto.woff2")

    def test_webfont_rule(self) -> None:
        webfonts = RUNTIME_CACHING[1]
        assert webfonts.handler is CachingStrategy.CACHE_FIRST
        assert matches(webfonts, "https://fonts.gstatic.com/s/roboto.woff2")

    @pytest.mark.parametrize("url", ["/img/logo.png", "/a.jpg", "/b.jpeg", "/icon.svg"])
    def test_image_rule_matches_extensions(self, url: str) -> None:
        assert matches(RUNTIME_CACHING[2], url)

    @pytest.mark.parametrize("url", ["/img/logo.gif", "/icon.svgz", "/app.js"])
    def test_image_rule_ignores_other_files(self, url: str) -> None:
        assert not matches(RUNTIME_CACHING[2], url)


class TestJsRendering:
    def test_regex_literal_escapes_slashes(self) -> None:
        assert JsRegex(r"^https://fonts\.googleapis\.com").to_js() == r"/^https:\/\/fonts\.googleapis\.com/"

    def test_already_escaped_slash_untouched(self) -> None:
        assert JsRegex(r"a\/b").to_js() == r"/a\/b/"

    def test_slash_after_escaped_backslash_is_escaped(self) -> None:
        assert JsRegex(r"a\\/b").to_js() == r"/a\\\/b/"

    def test_nested_literal(self) -> None:
        value = {"urlPattern": JsRegex(r"\.png$"), "options": {"statuses": [0, 200], "on": True}}
        assert to_js_literal(value) == (
            '{"urlPattern": /\\.png$/, "options": {"statuses": [0, 200], "on": true}}'
        )

    def test_script_requires_workbox(self) -> None:
        script = render_script(GenerateSWOptions.for_directory("public"))

        assert "require('workbox-build')" in script
        assert r"/^https:\/\/fonts\.gstatic\.com/" in script
        assert '"swDest": "public/service-worker.js"' in script


class TestGenerateSW:
    def test_parses_report(self) -> None:
        stdout = 'noise\n{"count": 12, "size": 2048, "warnings": ["big.js is 3 MB"]}\n'

        with patch(RUN, return_value=completed(stdout=stdout)) as run:
            report = generate_sw(GenerateSWOptions.for_directory("public"), node_binary="node18", cwd="web")

        args, kwargs = run.call_args
        assert args[0][:2] == ["node18", "-e"]
        assert kwargs["cwd"] == "web"
        assert report.count == 12
        assert report.size == 2048
        assert report.warnings == ["big.js is 3 MB"]

    def test_failure_raises_build_error(self) -> None:
        with patch(RUN, return_value=completed(returncode=1, stderr="Cannot find module 'workbox-build'")):
            with pytest.raises(BuildError) as exc_info:
                generate_sw(GenerateSWOptions.for_directory("public"))

        assert "workbox-build" in exc_info.value.stderr

    def test_missing_report_raises_build_error(self) -> None:
        with patch(RUN, return_value=completed(stdout="")):
            with pytest.raises(BuildError):
                generate_sw(GenerateSWOptions.for_directory("public"))


class TestBuildSW:
    def test_prints_each_warning(self, capsys, make_settings) -> None:
        stdout = '{"count": 1, "size": 10, "warnings": ["first", "second"]}'

        with patch(RUN, return_value=completed(stdout=stdout)):
            report = build_sw("public", make_settings())

        printed = capsys.readouterr().out.splitlines()
        assert "first" in printed
        assert "second" in printed
        assert report.count == 1

    def test_relative_dir_resolved_when_node_runs_elsewhere(self, tmp_path, monkeypatch, make_settings) -> None:
        monkeypatch.chdir(tmp_path)
        stdout = '{"count": 0, "size": 0, "warnings": []}'

        with patch(RUN, return_value=completed(stdout=stdout)) as run:
            build_sw("resources/public", make_settings(workbox_project_dir="/opt/web-tools"))

        script = run.call_args[0][0][2]
        expected = os.path.abspath("resources/public")
        assert run.call_args.kwargs["cwd"] == "/opt/web-tools"
        assert f'"globDirectory": "{expected}"' in script
        assert f'"swDest": "{expected}/service-worker.js"' in script

    def test_relative_dir_kept_without_project_dir(self, make_settings) -> None:
        stdout = '{"count": 0, "size": 0, "warnings": []}'

        with patch(RUN, return_value=completed(stdout=stdout)) as run:
            build_sw("resources/public", make_settings(workbox_project_dir=None))

        assert run.call_args.kwargs["cwd"] is None
        assert '"globDirectory": "resources/public"' in run.call_args[0][0][2]

    def test_main_returns_nonzero_on_failure(self) -> None:
        with patch(RUN, return_value=completed(returncode=1, stderr="ENOENT")):
            assert main(["missing/dir"]) == 1

    def test_main_success(self) -> None:
        with patch(RUN, return_value=completed(stdout='{"count": 0, "size": 0, "warnings": []}')) as run:
            assert main(["public"]) == 0

        assert '"globDirectory": "public"' in run.call_args[0][0][2]
