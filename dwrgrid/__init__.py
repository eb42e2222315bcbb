"""dwrgrid - example grid-data handlers served over a DWR-style remoting API.

The handlers generate or echo small lists of employee records and wrap them
in the envelope an ``Ext.data.JsonReader`` consumes.
"""
