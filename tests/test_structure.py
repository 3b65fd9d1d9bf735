"""
Structure lint tests
Verify that the component skeleton exists and follows conventions.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
COMPONENTS = ("participants", "meeting_cost")


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_components_have_standard_modules(self) -> None:
        """Every component exposes models, a shell layer and unit tests."""
        for name in COMPONENTS:
            comp = PROJECT_ROOT / "src" / "components" / name
            assert (comp / "__init__.py").is_file(), f"{name} missing __init__.py"
            assert (comp / "models.py").is_file(), f"{name} missing models.py"
            assert (comp / "component.py").is_file(), f"{name} missing component.py"
            assert (comp / "tests" / "test_unit.py").is_file(), f"{name} missing tests"

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_rules_file_present(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_components_do_not_import_ui(self) -> None:
        """Functional core stays free of the UI framework."""
        for path in (PROJECT_ROOT / "src" / "components").rglob("*.py"):
            text = path.read_text()
            assert "import flet" not in text, f"{path} imports flet"
            assert "src.ui" not in text, f"{path} imports the UI layer"
