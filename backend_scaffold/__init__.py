"""create-backend-project -- scaffolds a Node.js / Express backend skeleton."""

__version__ = "1.0.0"
