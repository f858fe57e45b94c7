"""fsd-starter: bootstrap Vite + React projects with a Feature-Sliced Design layout."""

__version__ = '0.1.0'
