UI_ELEMENTS = [
    {"element_id": 1, "seq_id": 10, "element_type": "header", "label": "Quotation request", "product": "*"},
    {"element_id": 2, "seq_id": 20, "element_type": "text", "label": "Customer name", "product": "*",
     "properties": {"required": True, "maxLength": 200}},
    {"element_id": 3, "seq_id": 30, "element_type": "dropdown", "label": "City", "options_key": "city",
     "trigger_event": "onChange", "product": "*"},
    {"element_id": 4, "seq_id": 40, "element_type": "dropdown", "label": "District", "options_key": "district",
     "parent_id": 3, "parent_label": "City", "product": "*"},
    {"element_id": 5, "seq_id": 50, "element_type": "checkbox", "label": "Needs delivery", "initial_value": "FALSE",
     "trigger_event": "onChange", "product": "general"},
    {"element_id": 6, "seq_id": 60, "element_type": "text", "label": "Delivery address", "parent_id": 5,
     "product": "general"},
    {"element_id": 7, "seq_id": 55, "element_type": "number", "label": "Quantity", "initial_value": "1",
     "properties": {"min": 1, "step": 1}, "product": "widgetA"},
    {"element_id": 8, "seq_id": 70, "element_type": "switch", "label": "Express", "initial_value": "TRUE",
     "product": "widgetB"},
]

OPTIONS = [
    {"option_id": 1, "option_key": "city", "value": "TPE", "label": "Taipei"},
    {"option_id": 2, "option_key": "city", "value": "KHH", "label": "Kaohsiung"},
    {"option_id": 3, "option_key": "district", "value": "XINYI", "label": "Xinyi", "parent_value": "TPE"},
    {"option_id": 4, "option_key": "district", "value": "DAAN", "label": "Da'an", "parent_value": "TPE"},
    {"option_id": 5, "option_key": "city", "value": "TXG", "label": "Taichung"},
    {"option_id": 6, "option_key": "district", "value": "ZUOYING", "label": "Zuoying", "parent_value": "KHH"},
    {"option_id": 7, "option_key": "priority", "value": "normal", "label": "Normal"},
    {"option_id": 8, "option_key": "priority", "value": "rush", "label": "Rush", "product": "widgetA"},
]

UI_CHANGES = [
    {"change_id": 1, "element_id": 5, "parent_value": "TRUE", "action_id": 6, "action_type": "show"},
    {"change_id": 2, "element_id": 5, "parent_value": "FALSE", "action_id": 6, "action_type": "hide"},
    {"change_id": 3, "element_id": 3, "parent_value": None, "action_id": 4, "action_type": "reload_options"},
]
