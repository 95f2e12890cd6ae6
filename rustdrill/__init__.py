"""Terminal styling, rust-project.json generation and worked lesson solutions for Rust exercises."""

__version__ = "5.5.1"