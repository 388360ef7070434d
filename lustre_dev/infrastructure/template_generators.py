"""Template generators implementation for the preview entry point."""

from importlib.resources import files

from lustre_dev.domain.models import AppShape
from lustre_dev.ports.template_generator import TemplateGeneratorPort

PLACEHOLDER = "{app_name}"


class PreviewTemplateGenerators(TemplateGeneratorPort):
    """Generators for the preview's entry module and HTML shell."""

    @staticmethod
    def load_template(name: str) -> str:
        """Read a template bundled with the package."""
        return (files("lustre_dev") / "templates" / name).read_text(encoding="utf-8")

    def generate_entry(self, shape: AppShape) -> str:
        """Generate the entry module, starting an App or calling main."""
        if shape.is_lifecycle_app:
            template = self.load_template("entry-with-start.mjs")
        else:
            template = self.load_template("entry-with-main.mjs")
        return template.replace(PLACEHOLDER, shape.module)

    def generate_shell(self, use_lustre_ui: bool = False) -> str:
        """Generate the HTML shell, optionally linking the lustre/ui stylesheet."""
        if use_lustre_ui:
            return self.load_template("index-with-lustre-ui.html")
        return self.load_template("index.html")
