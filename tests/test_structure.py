"""
Structure lint tests
Verify that the component layout exists and follows conventions.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = PROJECT_ROOT / "formkit"

COMPONENTS = ["person_form", "view_model", "binding"]


class TestProjectStructure:
    """Verify project structure follows component conventions."""

    def test_core_directories_exist(self) -> None:
        assert (PACKAGE_ROOT / "core" / "ports").is_dir()
        assert (PACKAGE_ROOT / "domain").is_dir()
        assert (PACKAGE_ROOT / "rules").is_dir()

    def test_adapters_directory_exists(self) -> None:
        assert (PACKAGE_ROOT / "adapters").is_dir()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()


class TestComponentLayout:
    """Every component ships models, component entry points and unit tests."""

    def test_components_have_required_files(self) -> None:
        for name in COMPONENTS:
            component_dir = PACKAGE_ROOT / "components" / name
            assert (component_dir / "__init__.py").is_file(), name
            assert (component_dir / "models.py").is_file(), name
            assert (component_dir / "component.py").is_file(), name
            assert (component_dir / "tests" / "test_unit.py").is_file(), name

    def test_components_export_all(self) -> None:
        for name in COMPONENTS:
            init_text = (PACKAGE_ROOT / "components" / name / "__init__.py").read_text()
            assert "__all__" in init_text, name
