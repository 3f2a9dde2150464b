""" The grid-layout engine, and the adapters that feed it rows. """
