import sys

from Tint import LOG, Logging, format_inline, format_structured

# ========================================================================
# STRUCTURED - global style, targeted substrings, per-character notes
# ========================================================================

structured = [
    ("Operation finished", {"all": {"color": "green", "style": "bold"}}),
    (
        "Disk usage at 97%, cleanup required",
        {
            "all": {"color": "white"},
            "currents": [
                {"target": "97%", "color": "red", "style": "underline"},
                {"target": "cleanup", "style": "italic"},
            ],
        },
    ),
    ("H2O and CO2", {"notes": [{"target": "H2O", "index": 1, "reg": "down"},
                               {"target": "CO2", "index": 2, "reg": "down"}]}),
    ("E = mc2", {"currents": [{"target": "mc2", "color": "#ffaa00"}],
                 "notes": [{"target": "mc2", "index": 2, "reg": "up"}]}),
]

# ========================================================================
# INLINE - |kind.argument.text|
# ========================================================================

inline = [
    "|c.red.Error:||c.reset. ||s.bold.disk full|",
    "|c.bg_blue.on blue||c.reset. ||c.green+.bright green|",
    "|c.255-128-0.orange rgb||c.reset. ||c.#0af.hex|",
    "|c.cyan.x||i.up.2||c.reset. squared|",
]


def run(log: Logging = LOG):
    log.info("Levels", "cyan")
    log.debug("debug message")
    log.info("info message")
    log.warn("warning message")
    log.error("error message")
    log.print("printed in rgb", "120,200,80")

    log.info("Structured", "cyan")
    for text, options in structured:
        log.custom(text, options)

    log.info("Inline", "cyan")
    for text in inline:
        log.custom(text)

    return [format_structured(t, o) for t, o in structured] + [
        format_inline(t) for t in inline
    ]


if __name__ == "__main__":
    run(Logging.from_file(sys.argv[1]) if len(sys.argv) > 1 else LOG)
