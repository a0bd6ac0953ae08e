import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13", "3.14"]


def _install(session: nox.Session) -> None:
    """Install the project with all test extras into the nox virtualenv."""
    session.run(
        "poetry",
        "install",
        "--with",
        "test",
        "--all-extras",
        external=True,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no API or persistence involved)."""
    _install(session)
    session.run("pytest", "tests/catalog/domain/")


@nox.session(python=PYTHON_VERSIONS[-1])
def loadtest(session: nox.Session) -> None:
    """Run a short headless load test against a running server.

    Pass the target host as a positional argument: nox -s loadtest -- http://host:8000
    """
    _install(session)
    host = session.posargs[0] if session.posargs else "http://localhost:8000"
    session.run(
        "locust",
        "-f",
        "loadtests/locustfile.py",
        "CatalogUser",
        "CatalogBrowserUser",
        "--headless",
        "-u",
        "10",
        "-r",
        "2",
        "-t",
        "60s",
        "--host",
        host,
    )
