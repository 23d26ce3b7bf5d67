"""Orders: domain rules and events, event handlers, use cases, access logging and SQL storage."""