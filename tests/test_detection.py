"""
Tests for fingerprint loading and project type detection.
"""

import textwrap
from pathlib import Path

from ionkit.adapters.base import ProjectDeps
from ionkit.core.config.fingerprint_loader import (
    bundled_fingerprints,
    fingerprint_for,
    load_fingerprints,
)
from ionkit.core.config.loader import PROJECT_FILE
from ionkit.core.models import Fingerprint, ProjectType
from ionkit.core.services.detection import (
    detect,
    detect_type,
    match_fingerprint,
    read_manifest_dependencies,
)

from conftest import write_json


# ── Catalog ──────────────────────────────────────────────────────────


class TestFingerprintCatalog:
    def test_bundled_catalog_covers_every_type(self):
        assert set(bundled_fingerprints()) == set(ProjectType)

    def test_bundled_rules(self):
        assert fingerprint_for(ProjectType.ANGULAR).dependencies_any_of == ["@ionic/angular"]
        assert fingerprint_for(ProjectType.IONIC_ANGULAR).dependencies_any_of == ["ionic-angular"]
        ionic1 = fingerprint_for(ProjectType.IONIC1)
        assert ionic1.manifest == "bower.json"
        assert ionic1.dependencies_any_of == ["ionic"]
        assert fingerprint_for(ProjectType.CUSTOM).is_empty

    def test_load_custom_catalog(self, tmp_path: Path):
        catalog = tmp_path / "fp.yml"
        catalog.write_text(textwrap.dedent("""\
            angular:
              files_any_of: [angular.json]
            vue:
              dependencies_any_of: [vue]
        """))
        fps = load_fingerprints(catalog)
        assert list(fps) == [ProjectType.ANGULAR]
        assert fps[ProjectType.ANGULAR].files_any_of == ["angular.json"]

    def test_invalid_entry_skipped(self, tmp_path: Path):
        catalog = tmp_path / "fp.yml"
        catalog.write_text(textwrap.dedent("""\
            angular:
              dependencies_any_of: 12
            ionic1:
              manifest: bower.json
        """))
        fps = load_fingerprints(catalog)
        assert list(fps) == [ProjectType.IONIC1]

    def test_missing_catalog_is_empty(self, tmp_path: Path):
        assert load_fingerprints(tmp_path / "nope.yml") == {}

    def test_non_mapping_catalog_is_empty(self, tmp_path: Path):
        catalog = tmp_path / "fp.yml"
        catalog.write_text("- a\n- b\n")
        assert load_fingerprints(catalog) == {}


# ── Matching ─────────────────────────────────────────────────────────


class TestReadManifest:
    def test_union_of_dependency_sections(self, tmp_path: Path):
        manifest = write_json(tmp_path / "package.json", {
            "dependencies": {"a": "1"},
            "devDependencies": {"b": "1"},
        })
        assert read_manifest_dependencies(manifest) == {"a", "b"}

    def test_missing_or_malformed(self, tmp_path: Path):
        assert read_manifest_dependencies(tmp_path / "package.json") == set()
        bad = tmp_path / "bad.json"
        bad.write_text("{oops")
        assert read_manifest_dependencies(bad) == set()
        listing = write_json(tmp_path / "list.json", ["a"])
        assert read_manifest_dependencies(listing) == set()

    def test_binary_manifest(self, tmp_path: Path):
        manifest = tmp_path / "package.json"
        manifest.write_bytes(b"\xff\xfe\x00garbage")
        assert read_manifest_dependencies(manifest) == set()

    def test_binary_manifest_does_not_break_detection(self, tmp_path: Path):
        write_json(tmp_path / PROJECT_FILE, {"name": "app"})
        (tmp_path / "package.json").write_bytes(b"\xff\xfe\x00garbage")
        (tmp_path / "bower.json").write_bytes(b"\xff")
        assert detect_type(tmp_path / PROJECT_FILE, ProjectDeps(exec_path=tmp_path)) is None


class TestMatchFingerprint:
    def test_dependency_match(self, tmp_path: Path):
        write_json(tmp_path / "package.json", {"devDependencies": {"ionic-angular": "3"}})
        rule = Fingerprint(dependencies_any_of=["ionic-angular"])
        assert match_fingerprint(tmp_path, rule)

    def test_dependency_miss(self, tmp_path: Path):
        write_json(tmp_path / "package.json", {"dependencies": {"react": "18"}})
        assert not match_fingerprint(tmp_path, Fingerprint(dependencies_any_of=["ionic-angular"]))

    def test_file_criterion(self, tmp_path: Path):
        rule = Fingerprint(files_any_of=["angular.json"])
        assert not match_fingerprint(tmp_path, rule)
        (tmp_path / "angular.json").write_text("{}")
        assert match_fingerprint(tmp_path, rule)

    def test_all_criteria_must_hold(self, tmp_path: Path):
        write_json(tmp_path / "package.json", {"dependencies": {"x": "1"}})
        rule = Fingerprint(dependencies_any_of=["x"], files_any_of=["angular.json"])
        assert not match_fingerprint(tmp_path, rule)

    def test_empty_rule_never_matches(self, tmp_path: Path):
        write_json(tmp_path / "package.json", {"dependencies": {"x": "1"}})
        assert not match_fingerprint(tmp_path, Fingerprint())

    def test_custom_manifest(self, tmp_path: Path):
        write_json(tmp_path / "bower.json", {"dependencies": {"ionic": "1"}})
        assert match_fingerprint(tmp_path, Fingerprint(manifest="bower.json", dependencies_any_of=["ionic"]))


# ── Type detection ───────────────────────────────────────────────────


class TestDetectType:
    def _deps(self, tmp_path: Path) -> ProjectDeps:
        return ProjectDeps(exec_path=tmp_path)

    def test_angular(self, tmp_path: Path, angular_app):
        write_json(tmp_path / PROJECT_FILE, {"name": "app"})
        angular_app()
        assert detect_type(tmp_path / PROJECT_FILE, self._deps(tmp_path)) == ProjectType.ANGULAR

    def test_ionic1_via_bower(self, tmp_path: Path):
        write_json(tmp_path / PROJECT_FILE, {"name": "app"})
        write_json(tmp_path / "bower.json", {"devDependencies": {"ionic": "1.3"}})
        assert detect_type(tmp_path / PROJECT_FILE, self._deps(tmp_path)) == ProjectType.IONIC1

    def test_priority_first_match_wins(self, tmp_path: Path):
        write_json(tmp_path / PROJECT_FILE, {"name": "app"})
        write_json(tmp_path / "package.json", {
            "dependencies": {"ionic-angular": "3", "@ionic/angular": "4"},
        })
        assert detect_type(tmp_path / PROJECT_FILE, self._deps(tmp_path)) == ProjectType.ANGULAR

    def test_nothing_detected(self, tmp_path: Path):
        write_json(tmp_path / PROJECT_FILE, {"name": "app"})
        assert detect_type(tmp_path / PROJECT_FILE, self._deps(tmp_path)) is None

    def test_custom_is_never_detected(self, tmp_path: Path, angular_app):
        write_json(tmp_path / PROJECT_FILE, {"name": "app"})
        angular_app()
        assert not detect(tmp_path / PROJECT_FILE, "custom", self._deps(tmp_path))

    def test_sub_project_directory_by_name(self, tmp_path: Path, angular_app):
        write_json(tmp_path / PROJECT_FILE, {
            "projects": {"web": {"name": "web", "root": "apps/web"}},
        })
        angular_app(tmp_path / "apps" / "web")

        deps = self._deps(tmp_path)
        assert detect_type(tmp_path / PROJECT_FILE, deps, "web") == ProjectType.ANGULAR
        assert detect_type(tmp_path / PROJECT_FILE, deps) is None

    def test_detection_does_not_migrate(self, tmp_path: Path):
        path = write_json(tmp_path / PROJECT_FILE, {"name": "app", "app_id": "X"})
        before = path.read_text()
        detect_type(path, self._deps(tmp_path))
        assert path.read_text() == before
