# Brand vetting pipeline package.
# Import submodules directly (``pipeline.graph``, ``pipeline.runner``);
# services depend on ``http_client`` and ``timing`` from here.
