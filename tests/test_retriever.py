import math

from argv import args, retriever

# Mixed native and string tokens, as users may pass to parse() directly.
TOKENS = [
    "Earth",  # 0
    "false",  # 1
    "true",  # 2
    "0",  # 3
    "1",  # 4
    "",  # 5
    False,  # 6
    True,  # 7
    1,  # 8
    0,  # 9
    5,  # 10
    math.nan,  # 11
    0.1,  # 12
    -1,  # 13
    " ",  # 14
]


# --- Arguments -------------------------------------------------------------- #


def test_arguments_as_boolean():
    result = args.parse(TOKENS)
    expected = [
        True,
        False,
        True,
        False,
        True,
        False,
        False,
        True,
        True,
        False,
        True,
        False,
        True,
        True,
        True,
    ]

    for i, value in enumerate(expected):
        assert result.arguments.asBoolean(i) is value, i
    assert result.arguments.asBoolean(len(TOKENS)) is None


def test_arguments_as_string():
    result = args.parse(TOKENS)
    expected = [
        "Earth",
        "false",
        "true",
        "0",
        "1",
        "",
        "false",
        "true",
        "1",
        "0",
        "5",
        "NaN",
        "0.1",
        "-1",
        " ",
    ]

    for i, value in enumerate(expected):
        assert result.arguments.asString(i) == value, i
    assert result.arguments.asString(len(TOKENS)) is None


def test_arguments_as_number():
    result = args.parse(
        [
            "Earth",
            "false",
            "",
            " ",
            False,
            True,
            5,
            math.nan,
            0.152,
            "2.242",
            "-35",
            "+100",
            "-2.5",
            "+2.5",
            "Infinity",
            "-Infinity",
            "0x10",
            "0b1011",
            "0o20",
            "5_000",
        ]
    )
    numbers = result.arguments

    assert math.isnan(numbers.asNumber(0))
    assert math.isnan(numbers.asNumber(1))
    assert numbers.asNumber(2) == 0
    assert numbers.asNumber(3) == 0
    assert numbers.asNumber(4) == 0
    assert numbers.asNumber(5) == 1
    assert numbers.asNumber(6) == 5
    assert math.isnan(numbers.asNumber(7))
    assert numbers.asNumber(8) == 0.152
    assert numbers.asNumber(9) == 2.242
    assert numbers.asNumber(10) == -35
    assert numbers.asNumber(11) == 100
    assert numbers.asNumber(12) == -2.5
    assert numbers.asNumber(13) == 2.5
    assert numbers.asNumber(14) == math.inf
    assert numbers.asNumber(15) == -math.inf
    assert numbers.asNumber(16) == 16
    assert numbers.asNumber(17) == 11
    assert numbers.asNumber(18) == 16
    assert math.isnan(numbers.asNumber(19))
    assert numbers.asNumber(20) is None


def test_arguments_as_array():
    result = args.parse(["a, b ,c", 5, True])
    assert result.arguments.asArray(0) == ["a", "b", "c"]
    assert result.arguments.asArray(0, trim=False) == ["a", " b ", "c"]
    assert result.arguments.asArray(0, " ") == ["a,", "b", ",c"]
    assert result.arguments.asArray(1) == ["5"]
    assert result.arguments.asArray(2) == ["true"]
    assert result.arguments.asArray(3) is None


# --- Options ---------------------------------------------------------------- #


def test_options_coercion():
    result = args.parse(
        [
            "--port",
            "8080",
            "--ratio=0.25",
            "--verbose",
            "--quiet=FALSE",
            "--tags",
            "red; green ;blue",
            "--version=+1_000",
        ]
    )
    opts = result.options

    assert opts.asNumber("port") == 8080
    assert opts.asNumber("ratio") == 0.25
    assert opts.asNumber("verbose") == 1
    assert opts.asBoolean("verbose") is True
    assert opts.asBoolean("quiet") is False
    assert opts.asString("verbose") == "true"
    assert opts.asArray("tags", ";") == ["red", "green", "blue"]
    assert opts.asString("version") == "+1_000"
    assert math.isnan(opts.asNumber("version"))

    assert opts.asNumber("missing") is None
    assert opts.asString("missing") is None
    assert opts.asBoolean("missing") is None
    assert opts.asArray("missing") is None


# --- Coercion --------------------------------------------------------------- #


def test_to_number():
    assert retriever.toNumber("  42  ") == 42
    assert isinstance(retriever.toNumber("42"), int)
    assert retriever.toNumber("1e3") == 1000
    assert retriever.toNumber(".5") == 0.5
    assert retriever.toNumber("5.") == 5
    assert retriever.toNumber("0X1F") == 31
    assert retriever.toNumber("007") == 7
    assert retriever.toNumber("+Infinity") == math.inf

    for text in ["-0x10", "0x", "0b2", "1,000", "inf", "nan", "1 2", "--1"]:
        assert math.isnan(retriever.toNumber(text)), text


def test_to_string_floats():
    assert retriever.toString(2.0) == "2"
    assert retriever.toString(-2.0) == "-2"
    assert retriever.toString(123456789012345680000.0) == "123456789012345680000"
    assert retriever.toString(2.0**60) == "1152921504606847000"
    assert retriever.toString(-0.0) == "0"
    assert retriever.toString(0.1) == "0.1"
    assert retriever.toString(1e-5) == "0.00001"
    assert retriever.toString(1.5e-7) == "1.5e-7"
    assert retriever.toString(1e21) == "1e+21"
    assert retriever.toString(math.inf) == "Infinity"
    assert retriever.toString(-math.inf) == "-Infinity"


def test_to_boolean():
    assert retriever.toBoolean(" FALSE ") is False
    assert retriever.toBoolean(" 0") is False
    assert retriever.toBoolean("no") is True
    assert retriever.toBoolean(0.0) is False
    assert retriever.toBoolean(-0.5) is True


def test_to_array():
    assert retriever.toArray("") == [""]
    assert retriever.toArray("abc", "") == ["a", "b", "c"]
    assert retriever.toArray(1.5, ".") == ["1", "5"]
