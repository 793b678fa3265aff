"""Fragment platform services: seeds, contexts, cookies, components, URLs,
rendering and dispatch."""
