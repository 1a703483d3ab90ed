"""Helper modules offered to SDK plugins: strings, JSON, HTML, HTTP and files."""