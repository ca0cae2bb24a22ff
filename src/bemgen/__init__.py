"""bemgen - generate React components from BEM-named stylesheets."""

__version__ = "0.1.0"
