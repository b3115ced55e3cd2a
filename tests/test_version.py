from importlib.metadata import version
import biogff


def test_version():
    """
    Check if the version of the package is equal to the version of the
    installed distribution.
    """
    assert biogff.__version__ == version("biogff")
