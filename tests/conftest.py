from mp_flags.testing.fixtures import fake_flag_provider, flag_engine, flag_environ  # noqa: F401
