def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import rcat.core.interfaces as I

    assert hasattr(I, "HighlighterProtocol")
    assert hasattr(I, "SyntaxCatalogProtocol")
    assert hasattr(I, "ThemeCatalogProtocol")
    assert hasattr(I, "LineRendererProtocol")
    assert hasattr(I, "DiagnosticsProtocol")


def test_default_implementations_satisfy_protocols():
    import logging

    from rcat.core.interfaces import (
        DiagnosticsProtocol,
        HighlighterProtocol,
        LineRendererProtocol,
        SyntaxCatalogProtocol,
        ThemeCatalogProtocol,
    )
    from rcat.highlighting import PygmentsHighlighter, SyntaxCatalog, ThemeCatalog
    from rcat.rendering import LineRenderer

    hl = PygmentsHighlighter()
    assert isinstance(hl, HighlighterProtocol)
    assert isinstance(LineRenderer(highlighter=hl), LineRendererProtocol)
    assert isinstance(SyntaxCatalog(), SyntaxCatalogProtocol)
    assert isinstance(ThemeCatalog(["monokai"]), ThemeCatalogProtocol)
    assert isinstance(logging.getLogger("rcat"), DiagnosticsProtocol)


def test_highlight_errors_are_not_source_errors():
    from rcat.core.errors import HighlightError, RcatError, SourceError

    err = HighlightError("Python", "boom")
    assert isinstance(err, RcatError)
    assert not isinstance(err, SourceError)
    assert err.grammar == "Python"
    assert "boom" in err.detail


def test_package_surface():
    import rcat

    assert rcat.__version__
    assert callable(rcat.Rcat.run)
    renderer = rcat.renderer_factory()
    assert isinstance(renderer, rcat.LineRenderer)
