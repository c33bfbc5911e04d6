import sys


def main() -> int:
    sys.path.append(".")
    import scripts.smoke_security as security
    import scripts.smoke_test as golden

    return golden.main() + security.main()


if __name__ == "__main__":
    failures = main()
    print(f"{failures} smoke check(s) failed" if failures else "all smoke checks passed")
    raise SystemExit(1 if failures else 0)
