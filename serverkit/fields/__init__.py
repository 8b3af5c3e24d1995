"""Field sets, selectors and requirements for matching objects by their fields."""