"""Related content for CMS records: manual relations and taxonomy/field similarity."""
