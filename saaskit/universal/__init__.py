"""Value models shared across domains, their solid wrappers and database fields."""