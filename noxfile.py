import nox

nox.options.reuse_existing_virtualenvs = True


@nox.session
def run(session):
    session.install(".")
    session.run("python", "-m", "org_subscriptions", *session.posargs)


@nox.session
def test(session):
    session.install(".[test]")
    session.run("pytest", *session.posargs)


@nox.session
def typing(session):
    session.install(".")
    session.install("mypy", "types-requests")
    session.run("mypy", "src/org_subscriptions")
