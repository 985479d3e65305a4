"""mirrord launch integration for Tomcat run configurations."""

__version__ = "0.1.0"
