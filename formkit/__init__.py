# formkit - form data model, validation and view-model generation
