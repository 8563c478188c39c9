from rich.pretty import pprint

from smartargs import *

__prog__ = "network-tool"


def main(argv=None):
    verbose = Cell(False)
    ssl = Cell(False)
    threads = Cell(4)
    port = Cell(8080)
    threshold = Cell(0.5)
    host = Cell("localhost")
    config = Cell()

    result = configure(argv, "Advanced SmartArgs demonstration with all features",
        flag(verbose, "v", "verbose", "Enable verbose logging"),
        flag(ssl, "s", "ssl", "Use SSL/TLS encryption"),
        integer(threads, "t", "threads", "Number of processing threads"),
        integer(port, "p", "port", "Server port number"),
        real(threshold, "r", "threshold", "Processing threshold (0.0-1.0)"),
        text(host, "H", "host", "Server hostname or IP address"),
        text(config, "c", "config", "Configuration file path", required=True),
    )

    pprint({
        "verbose": verbose.value,
        "ssl": ssl.value,
        "threads": threads.value,
        "port": port.value,
        "threshold": threshold.value,
        "host": host.value,
        "config": config.value,
        "arguments": result.positionals,
    })
    release(result)


if __name__ == '__main__':
    main()
