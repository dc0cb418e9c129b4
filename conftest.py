def pytest_addoption(parser):
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Also run the slow physics evaluations in 'tests/evals'.",
    )


def pytest_configure(config):
    if config.getoption("--run-all"):
        #drop the 'not slow' marker filter from the ini options
        config.option.markexpr = ""
