import pytest

from road_bumps.utils._docs import docdict, fill_doc


def test_fill_doc_function():
    """Test decorator to fill docstring on functions."""

    # test filling docstring
    @fill_doc
    def foo(verbose):
        """My doc.

        Parameters
        ----------
        %(verbose)s
        """
        pass

    assert "verbose : int | str | bool | None" in foo.__doc__
    assert "Sets the verbosity level." in foo.__doc__

    # test filling empty-docstring
    @fill_doc
    def foo():
        pass

    assert foo.__doc__ is None

    # test filling docstring with invalid key
    with pytest.raises(RuntimeError, match="Error documenting"):

        @fill_doc
        def foo(verbose):
            """My doc.

            Parameters
            ----------
            %(invalid_key)s
            """
            pass


def test_fill_doc_indentation():
    """Test that multi-line entries are indented like the docstring."""

    class Foo:
        @fill_doc
        def bar(self, x):
            """My doc.

            Parameters
            ----------
            %(x)s
            """

    lines = Foo.bar.__doc__.splitlines()
    idx = [k for k, line in enumerate(lines) if line.strip().startswith("x : ")][0]
    assert lines[idx + 1].startswith(" " * 16)
    assert lines[idx + 1].strip() == docdict["x"].strip().splitlines()[1].strip()


def test_docdict_entries_are_used():
    """Test that the entries of the docdict are used in the package."""
    import road_bumps
    from road_bumps import detector
    from road_bumps.peaks import _find, _properties

    docs = "\n".join(
        obj.__doc__
        for obj in (
            road_bumps.find_peaks,
            _properties.peak_prominences,
            _properties.peak_widths,
            _find.find_peaks,
            detector.detect_road_events,
            detector.compute_deviation,
        )
    )
    assert "%(" not in docs
