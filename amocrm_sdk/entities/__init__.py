"""amoCRM API entities: access rights and their data types."""