"""Services for sheet record extraction.

Modules are imported directly (``services.range_parser`` and so on); the
package-level names live in :mod:`sheet_record_extraction`.
"""
